import pytest

from app.models import Election
from app.models.election import (
    PHASE_CLOSED,
    PHASE_PENDING,
    PHASE_REGISTRATION,
    PHASE_VOTING,
)


@pytest.mark.parametrize(
    "block_height,expected",
    [
        (0, PHASE_REGISTRATION),
        (10, PHASE_REGISTRATION),
        (11, PHASE_PENDING),
        (14, PHASE_PENDING),
        (15, PHASE_VOTING),
        (20, PHASE_VOTING),
        (21, PHASE_CLOSED),
    ],
)
def test_phase_is_derived_from_block_height(block_height, expected):
    election = Election(registration_end_block=10, start_block=15, end_block=20)

    assert election.phase_at(block_height) == expected


def test_adjacent_thresholds_skip_pending():
    election = Election(registration_end_block=10, start_block=11, end_block=12)

    assert election.phase_at(10) == PHASE_REGISTRATION
    assert election.phase_at(11) == PHASE_VOTING
