from cwctl.cli.main import cli


class TestMainCLI:
    """Smoke tests for main CLI functionality."""

    def test_cli_help(self, cli_runner):
        """Test that CLI shows help."""
        result = cli_runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'cwctl' in result.output
        assert 'Commands:' in result.output

    def test_cli_invalid_command(self, cli_runner):
        """Test CLI with invalid command."""
        result = cli_runner.invoke(cli, ['invalid-command'])
        assert result.exit_code != 0
        assert 'Error' in result.output or 'No such command' in result.output

    def test_cli_command_groups(self, cli_runner):
        """Test that main command groups are available."""
        result = cli_runner.invoke(cli, ['--help'])
        for cmd in ['version', 'project', 'connections']:
            assert cmd in result.output

    def test_cli_version_option(self, cli_runner):
        from cwctl import __version__

        result = cli_runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert __version__ in result.output
