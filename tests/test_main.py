"""Test config loading and the terminal game loop."""

import io

import pytest
from pydantic import ValidationError

from wordscramble.main import load_config, play, main
from wordscramble.environment import GameConfig, WordScramble
from wordscramble.verifiers import WordListLexicon


@pytest.fixture
def word_files(tmp_path):
    start = tmp_path / "start.txt"
    start.write_text("silkworm\n", encoding="utf-8")
    words = tmp_path / "words.txt"
    words.write_text("silk\nworm\nowl\n", encoding="utf-8")
    return start, words


@pytest.fixture
def config_file(tmp_path, word_files):
    start, words = word_files
    path = tmp_path / "config.yaml"
    path.write_text(
        f"word_list_path: {start}\n"
        f"lexicon_path: {words}\n"
        "language: en\n"
        "seed: 42\n",
        encoding="utf-8",
    )
    return path


class TestLoadConfig:

    def test_load(self, config_file, word_files):
        config = load_config(str(config_file))
        assert isinstance(config, GameConfig)
        assert config.word_list_path == word_files[0]
        assert config.seed == 42

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(str(path)) == GameConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("min_length: 4\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(str(path))


class TestPlay:

    def test_words_commands_and_quit(self, capsys):
        game = WordScramble.create(
            lexicon=WordListLexicon(["silk", "owl"]),
            word_list=["silkworm"],
        )
        stdin = io.StringIO("silk\n\nowl\n/restart\nsilk\n/quit\nowl\n")

        score = play(game, stdin=stdin)

        # silk before the restart, silk again after it; owl after /quit is never read
        assert score == 9
        assert game.session.used_words == ["silk"]
        assert "/restart" in capsys.readouterr().out

    def test_trailing_newline_not_scored(self):
        game = WordScramble.create(
            lexicon=WordListLexicon(["silk"]),
            word_list=["silkworm"],
        )
        play(game, stdin=io.StringIO("silk\r\n"))
        assert game.session.score == 9


class TestMain:

    def test_full_game(self, config_file, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("silk\nzzqx\nowl\n"))

        assert main([str(config_file)]) == 0

        out = capsys.readouterr().out
        assert "[Word not Possible]" in out
        assert "Words found: 2" in out
        assert "Score: 17" in out

    def test_bad_config(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.yaml")]) == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_missing_word_list(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text(f"word_list_path: {tmp_path / 'missing.txt'}\n", encoding="utf-8")

        assert main([str(path)]) == 1
        assert "Error starting game" in capsys.readouterr().err
