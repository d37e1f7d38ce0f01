"""End-to-end tests for the sign-in then list-workspaces sequence."""

import json
from unittest.mock import MagicMock, patch

import pytest

from fabricboot.app.main_app import main, run
from fabricboot.core.auth import UserCancelled
from fabricboot.core.fabric_client import FabricClient, call_api
from fabricboot.http.errors import UnauthorizedError

PCA = "fabricboot.core.auth_helpers.msal.PublicClientApplication"
SESSION = "fabricboot.http.client.requests.Session"


def _msal_app(token="T"):
    app = MagicMock()
    app.acquire_token_interactive.return_value = {"access_token": token}
    return app


class TestCallApi:
    def test_bearer_header_and_url(self, mock_session):
        body = call_api("T", "https://api.fabric.microsoft.com/v1/", "workspaces", session=mock_session)

        assert body == mock_session.request.return_value.text
        kwargs = mock_session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "https://api.fabric.microsoft.com/v1/workspaces"
        assert kwargs["headers"] == {"Authorization": "Bearer T"}
        mock_session.close.assert_called_once_with()

    def test_token_provider_called_per_request(self, mock_session):
        provider = MagicMock(return_value="T2")
        client = FabricClient(provider, session=mock_session, timeout=5)
        client.get_text("workspaces")
        client.get_text("workspaces")
        assert provider.call_count == 2
        assert mock_session.request.call_args.kwargs["timeout"] == 5.0


class TestRun:
    def test_prints_token_then_body(self, fabric_cfg, mock_session, capsys):
        with patch(PCA, return_value=_msal_app("T")), patch(SESSION, return_value=mock_session):
            body = run(fabric_cfg)

        out = capsys.readouterr().out.splitlines()
        assert body == mock_session.request.return_value.text
        assert out[-2] == "T"
        assert out[-1] == body
        kwargs = mock_session.request.call_args.kwargs
        assert kwargs["headers"]["Authorization"] == "Bearer T"
        assert kwargs["url"] == "https://api.fabric.microsoft.com/v1/" + "workspaces"

    def test_auth_failure_issues_no_request(self, fabric_cfg, mock_session):
        with patch("fabricboot.app.main_app.authenticate", side_effect=UserCancelled("no")), \
                patch(SESSION, return_value=mock_session):
            with pytest.raises(UserCancelled):
                run(fabric_cfg)
        mock_session.request.assert_not_called()

    def test_out_callback(self, fabric_cfg, mock_session):
        seen = []
        with patch("fabricboot.app.main_app.authenticate", return_value="T"), \
                patch(SESSION, return_value=mock_session):
            run(fabric_cfg, out=seen.append)
        assert seen == ["T", mock_session.request.return_value.text]


class TestMain:
    @pytest.fixture
    def settings_file(self, tmp_path):
        p = tmp_path / "appsettings.json"
        p.write_text(json.dumps({"fabric": {"clientId": "app-1"}}), encoding="utf-8")
        return p

    def test_success_exit_code(self, settings_file, mock_session):
        with patch(PCA, return_value=_msal_app()), patch(SESSION, return_value=mock_session):
            assert main(["--config", str(settings_file)]) == 0

    def test_auth_error_reported(self, settings_file, mock_session, capsys):
        with patch("fabricboot.app.main_app.authenticate", side_effect=UserCancelled("User cancelled")), \
                patch(SESSION, return_value=mock_session):
            assert main(["--config", str(settings_file)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("[run] user_cancelled: User cancelled")
        mock_session.request.assert_not_called()

    def test_http_error_reported(self, settings_file):
        with patch("fabricboot.app.main_app.authenticate", return_value="T"), \
                patch("fabricboot.app.main_app.call_api",
                      side_effect=UnauthorizedError(401, "u", "Unauthorized", "denied")):
            assert main(["--config", str(settings_file)]) == 1

    def test_config_file_timeout_reaches_request(self, tmp_path, mock_session):
        p = tmp_path / "appsettings.json"
        p.write_text(json.dumps({"fabric": {"clientId": "app-1"}, "http": {"timeout_seconds": 5}}),
                     encoding="utf-8")
        with patch(PCA, return_value=_msal_app()), patch(SESSION, return_value=mock_session):
            assert main(["--config", str(p)]) == 0
        assert mock_session.request.call_args.kwargs["timeout"] == 5.0
        mock_session.close.assert_called_once_with()

    def test_missing_client_id(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "absent.json")]) == 1
        assert "invalid_client_id" in capsys.readouterr().err
