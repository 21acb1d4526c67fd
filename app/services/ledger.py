"""Host-ledger primitives shared by the election services.

Every state-changing service call runs through ``ledger_transaction``: one
writer at a time, commit on success, rollback on any error. The chain clock
and the election id counter live in the single ``ChainState`` row.
"""
import functools
import threading

from flask import current_app

from app.extensions import db
from app.models import ChainState, LedgerEvent
from app.models.chain_state import CHAIN_STATE_ID
from app.services.errors import InvalidParameters

_ledger_lock = threading.RLock()


def ledger_transaction(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with _ledger_lock:
            try:
                result = func(*args, **kwargs)
                db.session.commit()
            except Exception:
                db.session.rollback()
                raise
        return result

    return wrapper


def _load_chain_state(for_update=False):
    query = ChainState.query.filter_by(id=CHAIN_STATE_ID)
    if for_update:
        query = query.with_for_update()
    state = query.first()
    if state is None:
        state = ChainState(
            id=CHAIN_STATE_ID,
            block_height=current_app.config["GENESIS_BLOCK_HEIGHT"],
            election_counter=0,
        )
        db.session.add(state)
        db.session.flush()
    return state


@ledger_transaction
def init_chain_state():
    return _load_chain_state()


def get_chain_state():
    return ChainState.query.filter_by(id=CHAIN_STATE_ID).first()


def current_block_height():
    state = get_chain_state()
    if state is None:
        return current_app.config["GENESIS_BLOCK_HEIGHT"]
    return state.block_height


def next_election_id():
    state = get_chain_state()
    return state.election_counter if state is not None else 0


@ledger_transaction
def advance_block_height(new_height):
    if new_height > current_app.config["MAX_BLOCK_HEIGHT"]:
        raise InvalidParameters(
            f"Block height cannot exceed {current_app.config['MAX_BLOCK_HEIGHT']}."
        )
    state = _load_chain_state(for_update=True)
    if new_height < state.block_height:
        raise InvalidParameters(
            f"Block height cannot move backwards ({new_height} < {state.block_height})."
        )
    state.block_height = new_height
    current_app.logger.info("Chain advanced to block %s", new_height)
    return state.block_height


def allocate_election_id():
    """Return the next election id and advance the counter.

    Must be called inside a ledger transaction so that the allocation and the
    election insert commit together.
    """
    state = _load_chain_state(for_update=True)
    election_id = state.election_counter
    state.election_counter = election_id + 1
    return election_id


def emit_event(event_type, principal, block_height, election_id=None, **payload):
    event = LedgerEvent(
        event_type=event_type,
        principal=principal,
        election_id=election_id,
        block_height=block_height,
        payload=payload,
    )
    db.session.add(event)
    return event


def list_events(election_id=None, event_type=None):
    query = LedgerEvent.query
    if election_id is not None:
        query = query.filter_by(election_id=election_id)
    if event_type:
        query = query.filter_by(event_type=event_type)
    return query.order_by(LedgerEvent.id).all()
