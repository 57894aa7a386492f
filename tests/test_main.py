import io
import os
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

import requests

import main as entrypoint
from infrastructure.github.github_client import GitHubClient
from fakes import FakeSession, make_response


ENVIRONMENT = {"GITHUB_TOKEN": "main-test-credential", "GH_OWNER": "octocat"}
REPOSITORIES_BODY = [
    {"name": "alpha", "full_name": "octocat/alpha"},
    {"name": "beta", "full_name": "octocat/beta"},
]


class _DisconnectedSession(FakeSession):
    def request(self, method, url, json=None, timeout=None):
        self.requests.append({"method": method, "url": url, "json": json, "timeout": timeout})
        raise requests.ConnectionError("connection refused")


class MainTests(unittest.TestCase):
    def _run_main(
        self,
        session: FakeSession,
        environment: dict[str, str],
        choice: str | type[BaseException] = "1",
    ) -> tuple[int, str]:
        client = GitHubClient(token="main-test-credential", owner="octocat", session=session)
        output = io.StringIO()
        with patch.dict(os.environ, environment, clear=True), patch.object(
            entrypoint, "load_dotenv"
        ), patch.object(entrypoint, "configure_logging"), patch.object(
            GitHubClient, "from_settings", return_value=client
        ) as from_settings, patch(
            "builtins.input", side_effect=[choice] if isinstance(choice, str) else choice
        ), redirect_stdout(output):
            exit_code = entrypoint.main()
        self.from_settings = from_settings
        return exit_code, output.getvalue()

    def test_missing_configuration_returns_zero_without_remote_calls(self) -> None:
        session = FakeSession()

        exit_code, output = self._run_main(session, {})

        self.assertEqual(exit_code, 0)
        self.assertIn("Missing required environment variable: GITHUB_TOKEN", output)
        self.from_settings.assert_not_called()
        self.assertEqual(session.requests, [])

    def test_rejected_credential_exits_with_one_and_closes_session(self) -> None:
        session = FakeSession(
            [make_response(401, {"message": "Bad credentials", "documentation_url": "", "status": "401"})]
        )

        exit_code, output = self._run_main(session, ENVIRONMENT)

        self.assertEqual(exit_code, 1)
        self.assertIn("Merge Assistant Error 401: Bad credentials", output)
        self.assertEqual(len(session.requests), 1)
        self.assertEqual(session.close_calls, 1)

    def test_invalid_selection_returns_zero_before_workflow(self) -> None:
        session = FakeSession([make_response(200, {}), make_response(200, REPOSITORIES_BODY)])

        exit_code, output = self._run_main(session, ENVIRONMENT, choice="3")

        self.assertEqual(exit_code, 0)
        self.assertIn("2) Repo Name: beta, Full Name: octocat/beta", output)
        self.assertIn("Invalid repository number provided", output)
        self.assertEqual(len(session.requests), 2)
        self.assertEqual(session.close_calls, 1)

    def test_closed_stdin_is_treated_as_invalid_selection(self) -> None:
        session = FakeSession([make_response(200, {}), make_response(200, REPOSITORIES_BODY)])

        exit_code, output = self._run_main(session, ENVIRONMENT, choice=EOFError)

        self.assertEqual(exit_code, 0)
        self.assertIn("Invalid repository number provided", output)
        self.assertEqual(len(session.requests), 2)
        self.assertEqual(session.close_calls, 1)

    def test_transport_failure_exits_with_one_and_closes_session(self) -> None:
        session = _DisconnectedSession()

        exit_code, output = self._run_main(session, ENVIRONMENT)

        self.assertEqual(exit_code, 1)
        self.assertIn("Merge Assistant Error: connection refused", output)
        self.assertEqual(len(session.requests), 1)
        self.assertEqual(session.close_calls, 1)

    def test_empty_repository_list_returns_zero(self) -> None:
        session = FakeSession([make_response(200, {}), make_response(200, [])])

        exit_code, output = self._run_main(session, ENVIRONMENT)

        self.assertEqual(exit_code, 0)
        self.assertIn("No repositories available to select", output)

    def test_full_workflow_succeeds(self) -> None:
        session = FakeSession(
            [
                make_response(200, {}),
                make_response(200, REPOSITORIES_BODY),
                make_response(200, {"name": "master", "commit": {"sha": "abc123"}}),
                make_response(201, {}),
                make_response(201, {}),
                make_response(201, {"html_url": "https://github.com/octocat/beta/pull/1"}),
            ]
        )

        exit_code, output = self._run_main(session, ENVIRONMENT, choice="2")

        self.assertEqual(exit_code, 0)
        self.assertEqual(
            session.requests[2]["url"],
            "https://api.github.com/repos/octocat/beta/branches/master",
        )
        self.assertIn("New branch 'feat/hello.txt' created.", output)
        self.assertIn("File 'hello.txt' created in branch 'feat/hello.txt'.", output)
        self.assertIn(
            "Pull request from 'feat/hello.txt' to 'master' with title 'Added hello.txt' created",
            output,
        )
        self.assertIn("PR URL: https://github.com/octocat/beta/pull/1", output)
        self.assertIn("Merge Assistant finished execution", output)
        self.assertEqual(session.close_calls, 1)

    def test_workflow_failure_exits_with_one(self) -> None:
        session = FakeSession(
            [
                make_response(200, {}),
                make_response(200, REPOSITORIES_BODY),
                make_response(200, {"name": "master", "commit": {"sha": "abc123"}}),
                make_response(
                    422,
                    {"message": "Reference already exists", "documentation_url": "", "status": "422"},
                ),
            ]
        )

        exit_code, output = self._run_main(session, ENVIRONMENT)

        self.assertEqual(exit_code, 1)
        self.assertIn("Merge Assistant Error 422: Reference already exists", output)
        self.assertNotIn("Merge Assistant finished execution", output)
        self.assertEqual(len(session.requests), 4)
        self.assertEqual(session.close_calls, 1)


if __name__ == "__main__":
    unittest.main()
