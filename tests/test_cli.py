"""Tests for CLI commands.

Tests serve, info, fetch and transform commands.
"""

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from searchscape.cli import app

runner = CliRunner()


@pytest.fixture
def patched_dispatcher(dispatcher):
    """Route CLI commands through the mock-backed dispatcher."""
    with patch("searchscape.server.get_dispatcher", return_value=dispatcher):
        yield dispatcher


class TestServeCommand:
    """Test serve command."""

    def test_serve_default_is_stdio(self):
        """Test serve uses the stdio transport by default."""
        with patch("searchscape.server.mcp") as mock_mcp:
            mock_mcp.run = MagicMock()

            result = runner.invoke(app, ["serve"])

            assert result.exit_code == 0
            mock_mcp.run.assert_called_once_with(transport="stdio")

    def test_serve_http(self):
        """Test serve with the HTTP transport and custom port."""
        with patch("searchscape.server.mcp") as mock_mcp:
            mock_mcp.run = MagicMock()

            result = runner.invoke(app, ["serve", "--transport", "http", "--port", "9000"])

            assert result.exit_code == 0
            call_kwargs = mock_mcp.run.call_args.kwargs
            assert call_kwargs["transport"] == "http"
            assert call_kwargs["port"] == 9000
            assert call_kwargs["path"] == "/mcp"

    def test_serve_sse_custom_host(self):
        """Test serve with the SSE transport and custom host."""
        with patch("searchscape.server.mcp") as mock_mcp:
            mock_mcp.run = MagicMock()

            result = runner.invoke(app, ["serve", "-t", "sse", "--host", "127.0.0.1"])

            assert result.exit_code == 0
            call_kwargs = mock_mcp.run.call_args.kwargs
            assert call_kwargs["transport"] == "sse"
            assert call_kwargs["host"] == "127.0.0.1"

    def test_serve_unknown_transport(self):
        """Test an unknown transport exits with an error."""
        with patch("searchscape.server.mcp") as mock_mcp:
            result = runner.invoke(app, ["serve", "--transport", "carrier-pigeon"])

            assert result.exit_code == 1
            mock_mcp.run.assert_not_called()


class TestInfoCommand:
    """Test info command."""

    def test_info_displays_settings(self):
        """Test info command displays settings and filters."""
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "SearchScape Configuration" in result.output
        assert "instruct-pix2pix" in result.output


class TestFetchCommand:
    """Test fetch command."""

    def test_fetch_prints_url(self, patched_dispatcher):
        """Test a successful fetch prints the image URL."""
        result = runner.invoke(app, ["fetch", "cats", "--user-id", "u1"])

        assert result.exit_code == 0
        assert "http://img/1" in result.output

    def test_fetch_error_exits_nonzero(self, patched_dispatcher, mock_search_provider):
        """Test an error result exits with status 1."""
        from searchscape.errors import UpstreamError

        mock_search_provider.search.side_effect = UpstreamError("Unsplash API error: 403")

        result = runner.invoke(app, ["fetch", "cats"])

        assert result.exit_code == 1
        assert "Unsplash API error: 403" in result.output


class TestTransformCommand:
    """Test transform command."""

    def test_transform_with_prompt(self, patched_dispatcher):
        """Test --prompt fetches before transforming."""
        result = runner.invoke(app, ["transform", "enhance", "--prompt", "cats"])

        assert result.exit_code == 0
        assert "http://generated/1" in result.output

    def test_transform_without_fetch(self, patched_dispatcher):
        """Test transforming with no stored image fails."""
        result = runner.invoke(app, ["transform", "enhance", "--user-id", "fresh"])

        assert result.exit_code == 1
        assert "fetch an image first" in result.output


class TestHelpOutput:
    """Test help output for commands."""

    def test_main_help(self):
        """Test main help output."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "MCP server" in result.output
        for command in ("serve", "info", "fetch", "transform"):
            assert command in result.output

    def test_serve_help(self):
        """Test serve command help."""
        result = runner.invoke(app, ["serve", "--help"])

        assert result.exit_code == 0
        assert "--transport" in result.output
        assert "--port" in result.output
