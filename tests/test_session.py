"""Tests for the interactive session lifecycle (cli/session.py)."""

from __future__ import annotations

import signal

import pytest

from conftest import FakeEnvironment, RecordingInsight, meta
from yocli.cli import exit_codes
from yocli.cli.session import interactive_session, navigate_to_exit, run_interactive
from yocli.core.router import Router


def _recording_routes(calls: list[str]) -> dict[str, object]:
    return {
        "home": lambda r: calls.append("home"),
        "exit": lambda r: calls.append(f"exit<-{r.current_route}"),
    }


class TestExitGuarantee:
    def test_exit_runs_once_from_unstarted(self) -> None:
        calls: list[str] = []
        with interactive_session(FakeEnvironment(), RecordingInsight(), routes=_recording_routes(calls)) as router:
            assert router.current_route is None

        assert calls == ["exit<-None"]

    def test_exit_runs_once_after_navigation(self) -> None:
        calls: list[str] = []
        with interactive_session(FakeEnvironment(), RecordingInsight(), routes=_recording_routes(calls)) as router:
            router.navigate("home")

        assert calls == ["home", "exit<-home"]

    def test_exit_runs_when_handler_raises(self) -> None:
        calls: list[str] = []
        routes = _recording_routes(calls)

        def failing(r: Router) -> None:
            raise RuntimeError("broken screen")

        routes["home"] = failing

        with pytest.raises(RuntimeError, match="broken screen"):
            with interactive_session(FakeEnvironment(), RecordingInsight(), routes=routes) as router:
                router.navigate("home")

        assert calls == ["exit<-home"]

    def test_exit_runs_on_system_exit(self) -> None:
        calls: list[str] = []
        with pytest.raises(SystemExit):
            with interactive_session(FakeEnvironment(), RecordingInsight(), routes=_recording_routes(calls)):
                raise SystemExit(3)

        assert calls == ["exit<-None"]

    def test_exit_runs_on_keyboard_interrupt(self) -> None:
        calls: list[str] = []
        with pytest.raises(KeyboardInterrupt):
            with interactive_session(FakeEnvironment(), RecordingInsight(), routes=_recording_routes(calls)):
                raise KeyboardInterrupt

        assert calls == ["exit<-None"]

    def test_missing_exit_route_is_tolerated(self) -> None:
        with interactive_session(FakeEnvironment(), RecordingInsight(), routes={}) as router:
            pass
        assert router.current_route is None

    def test_navigate_to_exit_tolerates_missing_route(self) -> None:
        router = Router(FakeEnvironment(), RecordingInsight())
        navigate_to_exit(router)
        assert router.current_route is None


class TestSigterm:
    def test_sigterm_becomes_system_exit_and_is_restored(self) -> None:
        before = signal.getsignal(signal.SIGTERM)
        calls: list[str] = []

        with pytest.raises(SystemExit) as exc_info:
            with interactive_session(FakeEnvironment(), RecordingInsight(), routes=_recording_routes(calls)):
                handler = signal.getsignal(signal.SIGTERM)
                assert callable(handler)
                handler(signal.SIGTERM, None)

        assert exc_info.value.code == exit_codes.TERMINATED
        assert calls == ["exit<-None"]
        assert signal.getsignal(signal.SIGTERM) == before


class TestDefaultRoutes:
    def test_all_routes_registered(self) -> None:
        with interactive_session(FakeEnvironment(), RecordingInsight(), routes=None) as router:
            names = set(router.routes)
            # Replace the real exit banner to keep output quiet.
            router.register_route("exit", lambda r: None)

        assert names == {"home", "run", "install", "update", "exit", "clearConfig", "help"}


class TestRunInteractive:
    def test_tracks_refreshes_and_starts_at_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from yocli.cli.routes import ROUTES

        calls: list[str] = []
        monkeypatch.setitem(ROUTES, "home", lambda r: calls.append(f"home:{sorted(r.generators)}"))
        monkeypatch.setitem(ROUTES, "exit", lambda r: calls.append("exit"))

        env = FakeEnvironment([meta("webapp:app", "generator-webapp")])
        insight = RecordingInsight()
        run_interactive(env, insight)

        assert insight.tracked[0] == ("yoyo", "init")
        assert env.lookups == 1
        assert calls == ["home:['generator-webapp']", "exit"]
