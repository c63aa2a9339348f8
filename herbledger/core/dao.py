"""
Record operations - query, seed, record, list and custody transfer.
Each call is one request/response step against the record store; failures
are raised as LedgerError subclasses before or at the single mutation.
"""

from contextlib import closing
from typing import List, Optional, Sequence

from . import config
from .errors import ArgumentCountError, DecodeFailure, NotLocated, StoreFailure
from .results import build_result_set
from .schema import HerbRecord, decode_record, encode_record, salvage_record
from .seed import SEED_RECORDS, seed_key
from .store import IRecordStore
from ..util.logging import logger


def _require_args(args: Sequence[str], expected: int) -> None:
    if len(args) != expected:
        raise ArgumentCountError(expected, len(args))


def _fetch(store: IRecordStore, key: str) -> bytes:
    payload = store.get(key)
    if payload is None:
        logger.log_record_operation("get", key, status="not_found")
        raise NotLocated(key)
    return payload


def query_herb(store: IRecordStore, args: Sequence[str]) -> bytes:
    """Return the raw stored bytes of one herb record. Args: [key]."""
    _require_args(args, 1)
    key = args[0]

    payload = _fetch(store, key)
    logger.log_record_operation("get", key)
    return payload


def init_ledger(store: IRecordStore) -> None:
    """Write the ten seed records under keys "1".."10"."""
    for i, herb in enumerate(SEED_RECORDS):
        key = seed_key(i)
        try:
            store.put(key, encode_record(herb))
        except StoreFailure as e:
            logger.log_record_operation("seed", key, status="failed", details={"error": str(e)})
            raise StoreFailure(f"Failed to seed herb: {key}", key=key) from e
        logger.log_record_operation("seed", key, value=herb.name)


def record_herb(store: IRecordStore, args: Sequence[str]) -> None:
    """Record a new herb catch. Args: [key, name, location, timestamp, holder].

    Family and production are left empty.
    """
    _require_args(args, 5)
    key, name, location, timestamp, holder = args

    herb = HerbRecord(name=name, location=location, timestamp=timestamp, holder=holder)
    try:
        store.put(key, encode_record(herb))
    except StoreFailure as e:
        logger.log_record_operation("record", key, status="failed", details={"error": str(e)})
        raise StoreFailure(f"Failed to record herbs plucked: {key}", key=key) from e

    logger.log_record_operation("record", key, value=name)


def query_all_herbs(store: IRecordStore, start_key: Optional[str] = None, end_key: Optional[str] = None) -> bytes:
    """Return every record in the scan bounds as one JSON array.

    Bounds default to the configured list-range keys ("0".."999").
    """
    default_start, default_end = config.get_scan_bounds()
    start_key = default_start if start_key is None else start_key
    end_key = default_end if end_key is None else end_key

    rows: List = []
    try:
        with closing(store.scan(start_key, end_key)) as results:
            for row in results:
                rows.append(row)
    except StoreFailure:
        logger.log_range_scan(start_key, end_key, len(rows), status="failed")
        raise

    logger.log_range_scan(start_key, end_key, len(rows))
    payload = build_result_set(rows)
    logger.debug(f"- queryAllHerbs:\n{payload.decode('utf-8', errors='replace')}")
    return payload


def change_herb_holder(store: IRecordStore, args: Sequence[str]) -> None:
    """Transfer custody of a herb record. Args: [key, new_holder].

    With DECODE_STRICT disabled, undecodable stored bytes are rewritten keeping
    only the string-valued fields that could be recovered.
    """
    _require_args(args, 2)
    key, new_holder = args

    payload = _fetch(store, key)
    try:
        herb = decode_record(payload)
    except DecodeFailure as e:
        if config.is_decode_strict():
            logger.log_record_operation("transfer", key, status="failed", details={"error": e.message})
            raise
        logger.warning(f"Stored herb {key} did not decode, rewriting recovered fields: {e.message}")
        herb = salvage_record(payload)

    # Holder identity is not verified against the current custodian
    herb = herb.model_copy(update={"holder": new_holder})

    try:
        store.put(key, encode_record(herb))
    except StoreFailure as e:
        logger.log_record_operation("transfer", key, status="failed", details={"error": str(e)})
        raise StoreFailure(f"Failed to change herb production holder: {key}", key=key) from e

    logger.log_record_operation("transfer", key, value=new_holder)
