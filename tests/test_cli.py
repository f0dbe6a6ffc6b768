"""Tests for pagebake.cli — argument parsing, build, and routes."""

import sys
import types
from pathlib import Path

import pytest

from pagebake.cli import main
from pagebake.routing.route import get, redirect
from pagebake.routing.router import Router


def _create_router() -> Router:
    return (
        Router()
        .route("/", get(lambda: "home"))
        .route("/about", get(lambda: "about"))
        .route("/a", redirect("/b"))
        .route("/b", redirect("/about"))
        .fallback(lambda: "lost")
    )


def _create_cyclic_router() -> Router:
    return Router().route("/a", redirect("/b")).route("/b", redirect("/a"))


@pytest.fixture(autouse=True)
def _fake_site_module(monkeypatch: pytest.MonkeyPatch) -> None:
    mod = types.ModuleType("_fake_cli_site")
    mod.create_router = _create_router  # type: ignore[attr-defined]
    mod.cyclic = _create_cyclic_router  # type: ignore[attr-defined]
    mod.empty = Router  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_cli_site", mod)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["build", "routes"])
    def test_subcommand_help_exits_zero(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    @pytest.mark.parametrize("command", ["build", "routes"])
    def test_missing_router(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command])
        assert exc_info.value.code == 2

    def test_unknown_redirect_list(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "_fake_cli_site:create_router", "--redirect-list", "netlify"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "pagebake" in capsys.readouterr().out


class TestBuild:
    def test_writes_site(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["build", "_fake_cli_site:create_router", "--out", str(tmp_path)])

        assert (tmp_path / "index.html").read_text(encoding="utf-8") == "home"
        assert (tmp_path / "about.html").exists()
        assert (tmp_path / "a.html").exists()
        assert (tmp_path / "404.html").read_text(encoding="utf-8") == "lost"
        assert "Built _fake_cli_site:create_router" in capsys.readouterr().out

    def test_options(self, tmp_path: Path) -> None:
        main(
            [
                "build",
                "_fake_cli_site:create_router",
                "--out",
                str(tmp_path),
                "--fallback-name",
                "missing",
                "--resolve-chains",
                "--no-redirect-pages",
                "--redirect-list",
                "cloudflare",
                "--redirect-list",
                "static-web-server",
                "--sitemap",
                "https://x.test",
            ]
        )

        assert (tmp_path / "missing.html").exists()
        assert not (tmp_path / "a.html").exists()
        assert (tmp_path / "_redirects").read_text(encoding="utf-8") == "/a /b\n/b /about"
        assert (tmp_path / "config.toml").exists()
        assert "<loc>https://x.test/about</loc>" in (tmp_path / "sitemap.xml").read_text(
            encoding="utf-8"
        )

    def test_resolve_chains_in_redirect_pages(self, tmp_path: Path) -> None:
        main(["build", "_fake_cli_site:create_router", "--out", str(tmp_path), "--resolve-chains"])
        assert 'href="/about"' in (tmp_path / "a.html").read_text(encoding="utf-8")

    def test_cycle_exits_one(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "_fake_cli_site:cyclic", "--out", str(tmp_path), "--resolve-chains"])
        assert exc_info.value.code == 1
        assert "Cycle in redirects" in capsys.readouterr().err

    def test_bad_fallback_name_exits_one(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "_fake_cli_site:create_router", "--out", str(tmp_path), "--fallback-name", "a/b"])
        assert exc_info.value.code == 1

    def test_unresolvable_router_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "_fake_cli_site:missing"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestRoutes:
    def test_lists_everything(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_cli_site:create_router"])

        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split() == ["KIND", "PATH", "TARGET"]
        assert ["page", "/about"] in [line.split() for line in lines]
        assert ["redirect", "/a", "/b"] in [line.split() for line in lines]
        assert ["fallback", "/"] in [line.split() for line in lines]

    def test_empty_router(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_cli_site:empty"])
        assert "No routes registered." in capsys.readouterr().out

    def test_unresolvable_router_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "nonexistent_module_xyz"])
        assert exc_info.value.code == 1
        assert "Cannot import module" in capsys.readouterr().err
