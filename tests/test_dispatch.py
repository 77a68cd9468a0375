#!/usr/bin/env python3
"""
Tests for command dispatch and the OBS session lifecycle.

Covers:
1. Alias resolution and unknown commands
2. Commands that must never connect (help, version, completion)
3. Argument validation before connecting
4. Connection failures
5. Session always closed, whatever the outcome
6. Request timeouts
7. Global style options and NO_COLOR

Run with: python tests/test_dispatch.py
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from obsws_python.error import OBSSDKTimeoutError

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from fakes import FakeOBS, invoke, line_with

from obsctl.client import OBSSession
from obsctl.config import ObsConfig
from obsctl.errors import RemoteTimeoutError, remote_call
from obsctl.style import style_from_flag


# =============================================================================
# Test: Alias resolution
# =============================================================================

def test_alias_and_name_dispatch_the_same_command():
    """Test a group and command reached by name and by alias."""
    print("\n[TEST] Alias dispatch...")

    by_name, _ = invoke(FakeOBS(), 'studiomode', 'status')
    by_alias, _ = invoke(FakeOBS(), 'sm', 'ss')

    assert by_name.exit_code == 0, by_name.output
    assert by_alias.exit_code == 0, by_alias.output
    assert by_name.output == by_alias.output == "Studio mode is disabled\n"

    print("  PASS: 'sm ss' behaves like 'studiomode status'")


def test_unknown_command_lists_choices():
    """Test unknown commands fail with a usage error naming every choice."""
    print("\n[TEST] Unknown command...")

    result, req_client = invoke(FakeOBS(), 'scenez')
    assert result.exit_code == 2
    assert "No such command 'scenez'" in result.output
    assert "scene (sc)" in result.output
    assert "sceneitem (si)" in result.output
    req_client.assert_not_called()

    result, _ = invoke(FakeOBS(), 'scene', 'lst')
    assert result.exit_code == 2
    assert "list (ls)" in result.output
    assert "switch (sw)" in result.output

    print("  PASS: Exit 2 with the available commands and aliases")


def test_missing_argument_is_usage_error():
    print("\n[TEST] Missing argument...")

    result, req_client = invoke(FakeOBS(), 'scene', 'switch')
    assert result.exit_code == 2
    assert "Missing argument" in result.output
    req_client.assert_not_called()

    print("  PASS: Usage error before connecting")


# =============================================================================
# Test: Commands that never connect
# =============================================================================

def test_help_lists_commands_in_registration_order():
    print("\n[TEST] Help output...")

    result, req_client = invoke(FakeOBS(), '--help')
    assert result.exit_code == 0, result.output
    assert "obs-version (v)" in result.output
    assert result.output.index("obs-version (v)") < result.output.index("scene (sc)")
    assert result.output.index("scene (sc)") < result.output.index("media (mi)")
    req_client.assert_not_called()

    result, req_client = invoke(FakeOBS(), 'input', '-h')
    assert result.exit_code == 0, result.output
    assert "volume (vol)" in result.output
    req_client.assert_not_called()

    print("  PASS: Help never connects")


def test_version_does_not_connect():
    print("\n[TEST] Version flag...")

    result, req_client = invoke(FakeOBS(), '-v')
    assert result.exit_code == 0, result.output
    assert result.output.startswith("obsctl version: ")
    req_client.assert_not_called()

    print("  PASS: Version printed without a connection")


def test_completion_does_not_connect():
    print("\n[TEST] Completion script...")

    result, req_client = invoke(FakeOBS(), 'completion', 'zsh')
    assert result.exit_code == 0, result.output
    assert "_OBSCTL_COMPLETE" in result.output
    req_client.assert_not_called()

    result, _ = invoke(FakeOBS(), 'c', 'fish')
    assert result.exit_code == 0, result.output
    assert "complete" in result.output

    result, _ = invoke(FakeOBS(), 'completion', env={'SHELL': '/bin/tcsh'})
    assert result.exit_code == 2
    assert "cannot detect a supported shell" in result.output

    print("  PASS: Scripts generated offline, unknown shells rejected")


# =============================================================================
# Test: Validation before connecting
# =============================================================================

def test_volume_out_of_range_rejected_before_connecting():
    """Test the [-90, 0] dB bounds, including negative numbers as arguments."""
    print("\n[TEST] Volume bounds...")

    for db in ('-90.1', '0.1', 'loud'):
        fake = FakeOBS()
        fake.add_input('Mic', has_audio=True)
        result, req_client = invoke(fake, 'input', 'volume', 'Mic', db)
        assert result.exit_code == 2, f"{db}: {result.output}"
        req_client.assert_not_called()

    fake = FakeOBS()
    fake.add_input('Mic', has_audio=True)
    result, _ = invoke(fake, 'input', 'volume', 'Mic', '-90')
    assert result.exit_code == 0, result.output
    assert fake.inputs['Mic']['volume_db'] == -90.0
    assert "Set volume of input Mic to -90.0 dB" in result.output

    print("  PASS: Bounds inclusive, rejected values never reach OBS")


def test_bad_time_rejected_before_connecting():
    print("\n[TEST] Media time format...")

    for value in ('1:2:3:4', 'a:30'):
        result, req_client = invoke(FakeOBS(), 'media', 'cursor', 'Video', value)
        assert result.exit_code == 2, f"{value}: {result.output}"
        req_client.assert_not_called()

    print("  PASS: Malformed times give a usage error")


def test_connection_options_reach_client():
    print("\n[TEST] Connection options...")

    fake = FakeOBS()
    result, req_client = invoke(fake, '--host', 'studio', '--port', '4456', '-T', '3', 'scene', 'current',
                                env={'OBS_PASSWORD': 'hunter2'})
    assert result.exit_code == 0, result.output
    req_client.assert_called_once_with(host='studio', port=4456, password='hunter2', timeout=3)

    fake = FakeOBS()
    result, req_client = invoke(fake, 'scene', 'current')
    req_client.assert_called_once_with(host='localhost', port=4455, password=None, timeout=5)

    result, req_client = invoke(FakeOBS(), '--port', '70000', 'scene', 'current')
    assert result.exit_code == 2
    req_client.assert_not_called()

    print("  PASS: Options and environment variables configure the client")


# =============================================================================
# Test: Session lifecycle
# =============================================================================

def test_connection_failure():
    """Test refused connections exit 1 with the address in the message."""
    print("\n[TEST] Connection failure...")

    from click.testing import CliRunner

    from fakes import CLEAN_ENV
    from obsctl.main import cli

    with patch('obsctl.client.obs.ReqClient', side_effect=ConnectionRefusedError('refused')):
        result = CliRunner().invoke(cli, ['scene', 'list'], env=CLEAN_ENV)

    assert result.exit_code == 1
    assert "failed to connect to OBS at localhost:4455" in result.output
    assert "Traceback" not in result.output

    print("  PASS: Exit 1 without a traceback")


def test_session_closed_after_success_and_failure():
    print("\n[TEST] Session closed...")

    fake = FakeOBS()
    result, _ = invoke(fake, 'scene', 'list')
    assert result.exit_code == 0, result.output
    assert fake.disconnected

    fake = FakeOBS()
    result, _ = invoke(fake, 'sceneitem', 'hide', 'Scene', 'Ghost')
    assert result.exit_code == 1
    assert "scene item 'Ghost' not found" in result.output
    assert fake.disconnected

    print("  PASS: Disconnected on both paths")


def test_disconnect_failure_keeps_exit_code():
    print("\n[TEST] Disconnect failure...")

    class BrokenDisconnect(FakeOBS):
        def disconnect(self):
            raise OSError("socket already closed")

    with patch('obsctl.client.logger') as logger:
        result, _ = invoke(BrokenDisconnect(), 'studiomode', 'status')

    assert result.exit_code == 0, result.output
    assert result.output == "Studio mode is disabled\n"
    logger.warning.assert_called_once()

    print("  PASS: Logged as a warning, command result unchanged")


def test_session_connects_once():
    """Test OBSSession directly: lazy, single connection, idempotent close."""
    print("\n[TEST] OBSSession...")

    client = MagicMock()
    with patch('obsctl.client.obs.ReqClient', return_value=client) as req_client:
        session = OBSSession(ObsConfig(password=''))
        req_client.assert_not_called()

        with session as connected:
            assert connected is client
            assert session.connect() is client

        req_client.assert_called_once()
        client.disconnect.assert_called_once()
        session.disconnect()
        client.disconnect.assert_called_once()

        # A closed session connects afresh
        with session as connected:
            assert connected is client
        assert req_client.call_count == 2

    print("  PASS: One connection per session")


def test_remote_timeout_closes_session():
    """Test a request timeout exits 1, issues nothing further and still disconnects."""
    print("\n[TEST] Request timeout...")

    class SlowOBS(FakeOBS):
        def get_studio_mode_enabled(self):
            self._record('get_studio_mode_enabled')
            raise OBSSDKTimeoutError("Timeout while waiting for response")

    fake = SlowOBS()
    result, _ = invoke(fake, 'studiomode', 'toggle')

    assert result.exit_code == 1, result.output
    assert "failed to get studio mode status: Timeout while waiting for response" in result.output
    assert fake.mutating_calls() == []
    assert fake.disconnected

    with pytest.raises(RemoteTimeoutError):
        with remote_call("failed to get stream status"):
            raise OBSSDKTimeoutError("Timeout while waiting for response")

    print("  PASS: RemoteTimeoutError, session closed")


# =============================================================================
# Test: Output style options
# =============================================================================

def test_no_color_env_accepts_any_value():
    """Test any non-empty NO_COLOR switches to ASCII marks instead of failing."""
    print("\n[TEST] NO_COLOR values...")

    fake = FakeOBS()
    fake.add_input('Cam', scene='Scene')
    fake.add_input('Logo', scene='Scene')
    fake.scene_items['Scene'][1]['sceneItemEnabled'] = False

    for value in ('please', '1', 'true'):
        result, _ = invoke(fake, 'sceneitem', 'list', env={'NO_COLOR': value})
        assert result.exit_code == 0, f"NO_COLOR={value}: {result.output}"
        assert '+' in line_with(result.output, 'Cam')
        assert '-' in line_with(result.output, 'Logo')
        assert '✓' not in result.output

    result, _ = invoke(fake, 'completion', 'zsh', env={'NO_COLOR': 'please'})
    assert result.exit_code == 0, result.output

    result, _ = invoke(fake, 'sceneitem', 'list', env={'NO_COLOR': ''})
    assert result.exit_code == 0, result.output
    assert '✓' in line_with(result.output, 'Cam')

    print("  PASS: Non-empty NO_COLOR means no colour")


def test_style_options_reach_context():
    """Test --style, --no-border and --no-color build the command's Style."""
    print("\n[TEST] Style options...")

    fake = FakeOBS()
    with patch('obsctl.context.style_from_flag', wraps=style_from_flag) as build_style:
        result, _ = invoke(fake, '--style', 'red', '--no-border', 'scene', 'list')
    assert result.exit_code == 0, result.output
    build_style.assert_called_once_with('red', True, False)
    assert '╭' not in result.output
    assert '│' not in result.output

    with patch('obsctl.context.style_from_flag', wraps=style_from_flag) as build_style:
        result, _ = invoke(fake, '-s', 'blue', '--no-color', 'scene', 'list')
    assert result.exit_code == 0, result.output
    build_style.assert_called_once_with('blue', False, True)
    assert '╭' in result.output
    assert '+' in line_with(result.output, 'Scene  ')

    with patch('obsctl.context.style_from_flag', wraps=style_from_flag) as build_style:
        result, _ = invoke(fake, 'scene', 'list', env={'OBSCTL_STYLE': 'green', 'OBSCTL_STYLE_NO_BORDER': '1'})
    assert result.exit_code == 0, result.output
    build_style.assert_called_once_with('green', True, False)

    result, req_client = invoke(fake, '--style', 'pink', 'scene', 'list')
    assert result.exit_code == 2
    req_client.assert_not_called()

    print("  PASS: Global style options configure the output")


def main():
    """Run all dispatch tests."""
    print("=" * 60)
    print("Dispatch and Session Tests")
    print("=" * 60)

    tests = [
        ('Alias dispatch', test_alias_and_name_dispatch_the_same_command),
        ('Unknown command', test_unknown_command_lists_choices),
        ('Missing argument', test_missing_argument_is_usage_error),
        ('Help', test_help_lists_commands_in_registration_order),
        ('Version', test_version_does_not_connect),
        ('Completion', test_completion_does_not_connect),
        ('Volume bounds', test_volume_out_of_range_rejected_before_connecting),
        ('Time format', test_bad_time_rejected_before_connecting),
        ('Connection options', test_connection_options_reach_client),
        ('Connection failure', test_connection_failure),
        ('Session closed', test_session_closed_after_success_and_failure),
        ('Disconnect failure', test_disconnect_failure_keeps_exit_code),
        ('Session connects once', test_session_connects_once),
        ('Request timeout', test_remote_timeout_closes_session),
        ('NO_COLOR values', test_no_color_env_accepts_any_value),
        ('Style options', test_style_options_reach_context),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"  FAIL: {e}")
            results.append((name, False))

    print("\n" + "=" * 60)
    passed = sum(1 for _, r in results if r)
    for name, result in results:
        print(f"  [{'PASS' if result else 'FAIL'}] {name}")
    print(f"\n{passed}/{len(results)} tests passed")

    return 0 if passed == len(results) else 1


if __name__ == '__main__':
    sys.exit(main())
