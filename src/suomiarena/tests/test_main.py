"""Tests for the data server entry point."""
from unittest.mock import MagicMock, patch

import suomiarena.__main__ as entry_point
from suomiarena.config import settings


def test_main_runs_data_server():
    """Test that main starts the Flask app without touching local storage."""
    app = MagicMock()
    with patch("suomiarena.__main__.create_app", return_value=app), \
            patch("suomiarena.__main__.setup_logging") as setup_logging, \
            patch("suomiarena.models.base.init_db") as init_db:
        entry_point.main()

    setup_logging.assert_called_once()
    app.run.assert_called_once_with(host=settings.server.host, port=settings.server.port)
    init_db.assert_not_called()


def test_main_stops_on_keyboard_interrupt():
    """Test that Ctrl+C shuts the server down quietly."""
    app = MagicMock()
    app.run.side_effect = KeyboardInterrupt
    with patch("suomiarena.__main__.create_app", return_value=app), \
            patch("suomiarena.__main__.setup_logging"):
        entry_point.main()

    app.run.assert_called_once()
