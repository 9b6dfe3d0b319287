"""Pytest configuration and fixtures."""
import pytest


try:
    from pytest_codspeed import BenchmarkFixture  # noqa: F401
except ImportError:
    # Provide a no-op benchmark fixture when pytest-codspeed is not installed
    @pytest.fixture
    def benchmark():
        """No-op benchmark fixture for environments without pytest-codspeed."""
        def _passthrough(func, *args, **kwargs):
            return func(*args, **kwargs)
        return _passthrough


@pytest.fixture
def sample_output():
    """Terminal output of a colorized program, as a pager or compiler might print."""
    return (
        '\x1b[1mbuild\x1b[0m: compiling \x1b[38;5;208mantsy\x1b[0m\r\n'
        '\x1b[2K\x1b[1;32m   ok\x1b[0m  tokens.py\r\n'
        '\x1b[33;41mwarning\x1b[39;49m: unused import\r\n'
        '\x1b[H\x1b[12;40f\x1b[3A\x1b[D\x1b[?25l\x1b[48;5;17m \x1b[0m'
        'café 中文\x1b[5;999m!'
    )
