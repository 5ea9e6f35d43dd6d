"""Tests for the game-publish command line."""

import json
from unittest.mock import Mock

import pytest

from game_build_publisher import cli
from game_build_publisher.feedback import FeedbackApiError
from game_build_publisher.transfer import TransferResult


@pytest.fixture
def runner(monkeypatch) -> Mock:
    """Replace the subprocess runner used by ChannelPublisher's default."""
    fake = Mock(return_value=TransferResult(0, stdout="butler 15.21.0"))
    monkeypatch.setattr("game_build_publisher.publisher.run_subprocess", fake)
    return fake


class TestScanCommand:
    """Test `game-publish scan`."""

    def test_prints_commands(self, make_build, capsys) -> None:
        """Test that scan prints push and status lines on stdout."""
        root = make_build({"windows": ["game.exe"], "web": ["index.html"], "notes": ["readme.txt"]})

        exit_code = cli.main(["scan", str(root), "alice/mygame"])

        captured = capsys.readouterr()
        assert exit_code == 0
        assert captured.out.splitlines() == [
            f'butler push "{root / "web"}" "alice/mygame:html5"',
            f'butler push "{root / "windows"}" "alice/mygame:windows"',
            'butler status "alice/mygame"',
        ]
        assert "Unknown platform: notes/" in captured.err

    def test_missing_build_root(self, tmp_path, capsys) -> None:
        """Test that a missing build root exits 1."""
        exit_code = cli.main(["scan", str(tmp_path / "missing"), "alice/mygame"])

        assert exit_code == 1
        assert "Error: Directory not found" in capsys.readouterr().err

    def test_nothing_detected(self, make_build, capsys) -> None:
        """Test that zero classified platforms exits 1."""
        root = make_build({"notes": ["readme.txt"]})

        assert cli.main(["scan", str(root), "alice/mygame"]) == 1
        assert "No godot exports detected" in capsys.readouterr().err

    def test_missing_positionals(self) -> None:
        """Test that argparse rejects a missing destination."""
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["scan", "./build"])
        assert excinfo.value.code != 0

    def test_unknown_engine(self, make_build) -> None:
        """Test that --engine only accepts registered engines."""
        root = make_build({"web": ["index.html"]})
        with pytest.raises(SystemExit):
            cli.main(["scan", str(root), "alice/mygame", "--engine", "unity"])


class TestPublishCommand:
    """Test `game-publish publish`."""

    def test_dry_run(self, make_build, runner, capsys) -> None:
        """Test that --dry-run never calls the runner."""
        root = make_build({"windows": ["game.exe"], "linux": ["game"]})

        exit_code = cli.main([
            "publish", str(root), "alice/mygame", "--dry-run", "--version", "1.0", "--ignore", "*.map",
        ])

        assert exit_code == 0
        runner.assert_not_called()
        out = capsys.readouterr().out
        assert '--userversion "1.0" --ignore "*.map"' in out

    def test_repeated_ignore_keeps_every_pattern(self, make_build, runner, capsys) -> None:
        """Test that each --ignore is passed through, in order."""
        root = make_build({"web": ["index.html"]})

        exit_code = cli.main([
            "publish", "--ignore", "*.map", str(root), "alice/g", "--dry-run", "--ignore", "*.pdb",
        ])

        assert exit_code == 0
        out_lines = capsys.readouterr().out.splitlines()
        assert out_lines[0] == f'butler push "{root / "web"}" "alice/g:html5" --ignore "*.map" --ignore "*.pdb"'

    def test_real_run(self, make_build, runner) -> None:
        """Test that a real run checks the tool, pushes and checks status."""
        root = make_build({"web": ["index.html"]})

        exit_code = cli.main(["publish", str(root), "alice/mygame"])

        assert exit_code == 0
        assert [call.args[0][1] for call in runner.call_args_list] == ["-v", "push", "status"]

    def test_partial_failure(self, make_build, runner) -> None:
        """Test exit codes with and without --allow-partial."""
        root = make_build({"web": ["index.html"], "windows": ["game.exe"]})
        results = [TransferResult(0), TransferResult(0), TransferResult(1, stderr="nope"), TransferResult(0)]

        runner.side_effect = list(results)
        assert cli.main(["publish", str(root), "alice/mygame"]) == 1

        runner.side_effect = list(results)
        assert cli.main(["publish", str(root), "alice/mygame", "--allow-partial"]) == 0


class TestPushConfigCommand:
    """Test `game-publish push-config`."""

    def test_dry_run_from_config(self, make_build, runner, tmp_path, capsys) -> None:
        """Test that channels come from the config in its key order."""
        root = make_build({"windows": ["game.exe"], "web": ["index.html"]})
        config_path = tmp_path / "publish.json"
        config_path.write_text(json.dumps({
            "user": "alice",
            "game": "mygame",
            "channels": {"windows": str(root / "windows"), "html5": str(root / "web")},
        }))

        exit_code = cli.main(["push-config", str(config_path), "--dry-run"])

        assert exit_code == 0
        runner.assert_not_called()
        out_lines = capsys.readouterr().out.splitlines()
        assert out_lines[0].endswith('"alice/mygame:windows"')
        assert out_lines[1].endswith('"alice/mygame:html5"')
        assert out_lines[2] == 'butler status "alice/mygame"'

    def test_invalid_config(self, tmp_path, runner, capsys) -> None:
        """Test that an invalid config exits 1 before any channel."""
        config_path = tmp_path / "publish.json"
        config_path.write_text(json.dumps({"user": "alice", "channels": {"html5": "."}}))

        assert cli.main(["push-config", str(config_path)]) == 1
        assert "Invalid publish config" in capsys.readouterr().err
        runner.assert_not_called()


class TestFeedbackCommand:
    """Test `game-publish feedback`."""

    def test_requires_api_key(self, monkeypatch, capsys) -> None:
        """Test that a missing ITCH_IO_API_KEY exits 1."""
        monkeypatch.delenv("ITCH_IO_API_KEY", raising=False)

        assert cli.main(["feedback", "12345", "ratings"]) == 1
        assert "ITCH_IO_API_KEY" in capsys.readouterr().err

    def test_ratings(self, monkeypatch, capsys) -> None:
        """Test the ratings command with a stubbed client."""
        monkeypatch.setenv("ITCH_IO_API_KEY", "secret")
        client = Mock()
        client.get_ratings.return_value = {"title": "My Game", "average": 4.2, "rating_count": 7}
        monkeypatch.setattr(cli, "ItchClient", Mock(return_value=client))

        assert cli.main(["feedback", "12345", "ratings"]) == 0

        out = capsys.readouterr().out
        assert 'Ratings for "My Game":' in out
        assert "Average: 4.2/5" in out
        cli.ItchClient.assert_called_once_with("secret")

    def test_report(self, monkeypatch, capsys) -> None:
        """Test that the default report combines ratings, comments and totals."""
        monkeypatch.setenv("ITCH_IO_API_KEY", "secret")
        client = Mock()
        client.get_ratings.return_value = {"title": "My Game", "average": None}
        client.get_comments.return_value = [{"body": "love it"}]
        monkeypatch.setattr(cli, "ItchClient", Mock(return_value=client))

        assert cli.main(["feedback", "12345"]) == 0

        out = capsys.readouterr().out
        assert "Average: N/A/5" in out
        assert "Recent Comments (1):" in out
        assert "Positive: 1 (100%)" in out
        assert out.rstrip().endswith("https://itch.io/game/analytics/12345")
        client.get_comments.assert_called_once_with("12345", limit=50)

    def test_report_survives_failed_comments(self, monkeypatch, capsys) -> None:
        """Test that ratings still print when the comments request fails."""
        monkeypatch.setenv("ITCH_IO_API_KEY", "secret")
        client = Mock()
        client.get_ratings.return_value = {"title": "My Game", "average": 4.0}
        client.get_comments.side_effect = FeedbackApiError("HTTP 404")
        monkeypatch.setattr(cli, "ItchClient", Mock(return_value=client))

        assert cli.main(["feedback", "12345", "report"]) == 0

        captured = capsys.readouterr()
        assert 'Ratings for "My Game":' in captured.out
        assert "No comments to analyze" in captured.out
        assert "Could not fetch comments: HTTP 404" in captured.err

    def test_report_lists_ten_but_scores_all(self, monkeypatch, capsys) -> None:
        """Test that the report lists 10 comments and scores every fetched one."""
        monkeypatch.setenv("ITCH_IO_API_KEY", "secret")
        client = Mock()
        client.get_ratings.return_value = {"title": "My Game", "average": None}
        client.get_comments.return_value = [{"body": "love it"} for _ in range(30)]
        monkeypatch.setattr(cli, "ItchClient", Mock(return_value=client))

        assert cli.main(["feedback", "12345"]) == 0

        out = capsys.readouterr().out
        assert "Recent Comments (10):" in out
        assert "Sentiment Analysis (30 comments):" in out


class TestAnalyticsCommand:
    """Test `game-publish analytics`."""

    def test_lists_every_game(self, monkeypatch, capsys) -> None:
        """Test that no game id lists the account's games."""
        monkeypatch.setenv("ITCH_IO_API_KEY", "secret")
        client = Mock()
        client.list_games.return_value = [
            {"id": 1, "title": "First", "views_count": 10, "downloads_count": 2},
            {"id": 2, "title": "Second", "views_count": 5},
        ]
        monkeypatch.setattr(cli, "ItchClient", Mock(return_value=client))

        assert cli.main(["analytics"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "Found 2 game(s):",
            "",
            "First (ID: 1)",
            "   Views: 10 | Downloads: 2",
            "Second (ID: 2)",
            "   Views: 5 | Downloads: 0",
        ]
        client.get_game.assert_not_called()

    def test_single_game_with_price(self, monkeypatch, capsys) -> None:
        """Test stats for one paid game."""
        monkeypatch.setenv("ITCH_IO_API_KEY", "secret")
        client = Mock()
        client.get_game.return_value = {
            "title": "My Game", "views_count": 400, "downloads_count": 40, "purchases_count": 3, "price": 499,
        }
        monkeypatch.setattr(cli, "ItchClient", Mock(return_value=client))

        assert cli.main(["analytics", "12345"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "My Game",
            "   Views: 400",
            "   Downloads: 40",
            "   Purchases: 3",
            "   Price: $4.99",
        ]
        client.get_game.assert_called_once_with("12345")

    def test_api_error_exits_nonzero(self, monkeypatch, capsys) -> None:
        """Test that an API failure is reported as an error."""
        monkeypatch.setenv("ITCH_IO_API_KEY", "secret")
        client = Mock()
        client.list_games.side_effect = FeedbackApiError("HTTP 401")
        monkeypatch.setattr(cli, "ItchClient", Mock(return_value=client))

        assert cli.main(["analytics"]) == 1
        assert "Error: HTTP 401" in capsys.readouterr().err
