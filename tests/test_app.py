"""
Tests for the launcher: argument handling, exit codes and wiring.
"""
from unittest.mock import MagicMock, patch

import pytest

tk = pytest.importorskip("tkinter")

import app  # noqa: E402


class TestParseInitialWord:

    def test_no_argument(self):
        assert app.parse_initial_word(["quickdict"]) == ""

    def test_argument_is_trimmed(self):
        assert app.parse_initial_word(["quickdict", "  hello "]) == "hello"

    def test_extra_arguments_are_ignored(self):
        assert app.parse_initial_word(["quickdict", "hello", "world"]) == "hello"


class TestMain:

    def test_window_failure_returns_nonzero(self):
        with patch("app.MainWindow", side_effect=tk.TclError("no display")), \
                patch("app.close_all_sessions") as close_sessions:
            assert app.main(["quickdict"]) == 1
        close_sessions.assert_called_once()

    def test_normal_run_wires_callbacks_and_returns_zero(self):
        window = MagicMock()
        with patch("app.MainWindow", return_value=window), \
                patch("app.SearchController") as controller_cls, \
                patch("app.close_all_sessions") as close_sessions:
            assert app.main(["quickdict"]) == 0

        controller = controller_cls.return_value
        controller_cls.assert_called_once_with(window)
        assert window.search_callback is controller.search
        assert window.quit_callback is window.close_app
        window.mainloop.assert_called_once()
        window.set_input_text.assert_not_called()
        controller.search_in_background.assert_not_called()
        close_sessions.assert_called_once()

    def test_initial_word_prefills_input_and_searches_in_background(self):
        window = MagicMock()
        with patch("app.MainWindow", return_value=window), \
                patch("app.SearchController") as controller_cls, \
                patch("app.close_all_sessions"):
            app.main(["quickdict", " hello "])

        window.set_input_text.assert_called_once_with("hello")
        controller_cls.return_value.search_in_background.assert_called_once_with("hello")

    def test_sessions_closed_even_if_mainloop_raises(self):
        window = MagicMock()
        window.mainloop.side_effect = KeyboardInterrupt
        with patch("app.MainWindow", return_value=window), \
                patch("app.SearchController"), \
                patch("app.close_all_sessions") as close_sessions:
            with pytest.raises(KeyboardInterrupt):
                app.main(["quickdict"])
        close_sessions.assert_called_once()
