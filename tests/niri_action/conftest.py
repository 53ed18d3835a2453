"""Pytest configuration for niri-action tests."""

import pytest

from fixtures.mock_niri import FakePicker, FakeSession
from niri_action.models.entities import OutputInfo, WindowInfo, WorkspaceInfo


@pytest.fixture
def sample_windows():
    """Windows in niri's listing order."""
    return [
        WindowInfo(id=42, title="Firefox", app_id="firefox", workspace_id=3),
        WindowInfo(id=17, title=None, app_id="foot", workspace_id=7),
        WindowInfo(id=8, title="notes: todo.md", app_id="neovide", workspace_id=5),
    ]


@pytest.fixture
def sample_workspaces():
    """Workspaces listed out of index order; id 7 is focused, id 5 has the highest index."""
    return [
        WorkspaceInfo(id=5, idx=2, name=None, output="DP-1"),
        WorkspaceInfo(id=3, idx=0, name="mail", output="DP-1"),
        WorkspaceInfo(id=7, idx=1, name="dev", output="DP-1", is_active=True, is_focused=True),
    ]


@pytest.fixture
def sample_outputs():
    return {
        "DP-1": OutputInfo(name="DP-1", make="Dell Inc.", model="U2720Q", serial="ABC123"),
        "eDP-1": OutputInfo(name="eDP-1", make="BOE", model="0x095F", serial=None),
    }


@pytest.fixture
def fake_session(sample_windows, sample_workspaces, sample_outputs):
    """FakeSession populated with the sample listings."""
    return FakeSession(
        windows=sample_windows,
        workspaces=sample_workspaces,
        outputs=sample_outputs,
    )


@pytest.fixture
def fake_picker():
    """FakePicker that cancels unless a test sets ``output``."""
    return FakePicker()
