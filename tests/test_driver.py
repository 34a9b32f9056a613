"""Tests for alkanetools.growth.driver."""
import pytest

from alkanetools.growth.driver import (
    check_target_size,
    count_isomers,
    find_resume_point,
    generate_isomer_count,
)
from alkanetools.io.checkpoint import CheckpointError, DirectoryCheckpointStore, MemoryCheckpointStore


class RecordingStore(MemoryCheckpointStore):
    """Helper: memory store that records every call."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def load(self, size):
        self.calls.append(("load", size))
        return super().load(size)

    def save(self, size, generation):
        self.calls.append(("save", size))
        super().save(size, generation)


# --- target size ---

@pytest.mark.parametrize("bad", [0, -3, 2.5, "4", True, None])
def test_invalid_target_rejected_before_storage(bad):
    store = RecordingStore()
    with pytest.raises(ValueError):
        generate_isomer_count(bad, store, progress=False)
    assert store.calls == []


def test_check_target_size_accepts_positive():
    assert check_target_size(1) == 1
    assert check_target_size(12) == 12


# --- fresh runs ---

def test_fresh_run_saves_every_size():
    store = RecordingStore()
    result = generate_isomer_count(6, store, resume=False, progress=False)
    assert result.count == 5
    assert result.resumed_from is None
    assert [c for c in store.calls if c[0] == "save"] == [("save", k) for k in range(1, 7)]


def test_n_equals_one():
    result = generate_isomer_count(1, MemoryCheckpointStore(), progress=False)
    assert result.count == 1
    assert list(result.generation) == ["()"]


def test_count_isomers():
    assert count_isomers(7) == 9


def test_count_isomers_rejects_invalid():
    with pytest.raises(ValueError):
        count_isomers(0)


def test_count_isomers_parallel():
    assert count_isomers(9, processes=2) == 35


# --- resume ---

def test_resume_equivalence():
    direct = generate_isomer_count(8, MemoryCheckpointStore(), resume=False, progress=False)

    store = MemoryCheckpointStore()
    generate_isomer_count(7, store, progress=False)
    resumed = generate_isomer_count(8, store, progress=False)

    assert resumed.resumed_from == 7
    assert resumed.count == direct.count == 18
    assert set(resumed.generation) == set(direct.generation)


def test_resume_searches_downward_past_missing_sizes(tmp_path):
    store = DirectoryCheckpointStore(tmp_path)
    generate_isomer_count(4, store, progress=False)
    for k in (1, 2):
        store.path_for(k).unlink()

    result = generate_isomer_count(9, store, progress=False)
    assert result.resumed_from == 4
    assert result.count == 35
    assert store.sizes() == [3, 4, 5, 6, 7, 8, 9]


def test_resume_ignores_checkpoint_at_target():
    store = RecordingStore()
    generate_isomer_count(5, store, progress=False)
    store.calls.clear()
    result = generate_isomer_count(5, store, progress=False)
    assert result.resumed_from == 4
    assert ("load", 5) not in store.calls


def test_no_resume_skips_loading():
    store = RecordingStore()
    generate_isomer_count(3, store, resume=False, progress=False)
    assert not any(c[0] == "load" for c in store.calls)


def test_corrupt_checkpoint_is_not_skipped(tmp_path):
    store = DirectoryCheckpointStore(tmp_path)
    generate_isomer_count(3, store, progress=False)
    store.path_for(5).write_text("not json")
    with pytest.raises(CheckpointError):
        generate_isomer_count(7, store, progress=False)


def test_empty_checkpoint_is_not_resumed(tmp_path):
    store = DirectoryCheckpointStore(tmp_path)
    store.path_for(4).write_text("[]")
    with pytest.raises(CheckpointError, match="empty generation"):
        generate_isomer_count(6, store, progress=False)
    assert store.sizes() == [4]


def test_find_resume_point_none():
    assert find_resume_point(MemoryCheckpointStore(), 6) is None


# --- progress ---

def test_progress_goes_to_stderr(capsys):
    store = MemoryCheckpointStore()
    generate_isomer_count(4, store)
    err = capsys.readouterr().err
    assert "Starting from size 1" in err
    assert "[size=4] 2 unique trees" in err

    generate_isomer_count(5, store)
    err = capsys.readouterr().err
    assert "Resuming from size 4 with 2 trees" in err
