# core/extractor.py
from typing import Dict, List, Optional, Tuple
import lmdb
from config.settings import settings
from model.snapshot import BucketEntries, Snapshot
from util import functions
from util.enums import ExtractionFailure
from util.errors import ExtractionError
from util.timing import timed
import logging

logger = logging.getLogger(__name__)

# (raw name as stored, decoded name used in the snapshot)
BucketName = Tuple[bytes, str]


class Extractor:
    """
    Read-only snapshot of an LMDB store.

    Every named database is a bucket. The scan runs in two phases: one read
    transaction lists the bucket names from the main database, then each
    bucket is walked with its own read transaction and cursor. Keys come out
    hex-encoded, values as text. Any failure aborts the whole extraction.
    """

    def __init__(
        self,
        *,
        subdir: bool = settings.STORE_SUBDIR,
        lock: bool = settings.STORE_LOCK,
        max_buckets: int = settings.STORE_MAX_BUCKETS,
        value_errors: str = settings.STORE_VALUE_ERRORS,
    ) -> None:
        self._subdir = subdir
        self._lock = lock
        self._max_buckets = int(max_buckets)
        self._value_errors = value_errors

    def extract(self, path: str) -> Snapshot:
        env = self._open(path)
        try:
            with timed(logger, "extract.scan", path=path):
                names = self._bucket_names(env)
                buckets: Dict[str, BucketEntries] = {}
                for raw_name, name in names:
                    buckets[name] = self._read_bucket(env, raw_name, name)
        finally:
            env.close()

        logger.info(
            "extract.ok path=%s buckets=%d entries=%d",
            path,
            len(buckets),
            sum(len(b) for b in buckets.values()),
        )
        return Snapshot(path=path, buckets=buckets)

    def _open(self, path: str) -> lmdb.Environment:
        try:
            with timed(logger, "extract.open", path=path):
                return lmdb.open(
                    path,
                    readonly=True,
                    create=False,
                    subdir=self._subdir,
                    lock=self._lock,
                    max_dbs=self._max_buckets,
                )
        except (lmdb.Error, ValueError) as e:
            # ValueError covers paths the filesystem encoding can't represent.
            raise ExtractionError(ExtractionFailure.OPEN_FAILED, cause=e) from e

    def _bucket_names(self, env: lmdb.Environment) -> List[BucketName]:
        """
        List bucket names from the main database in engine order.
        Names are decoded like values; two raw names decoding to the same
        text would merge buckets, so that aborts the scan.
        """
        out: List[BucketName] = []
        seen: Dict[str, bytes] = {}
        try:
            with env.begin() as txn:
                for raw in txn.cursor().iternext(keys=True, values=False):
                    raw = bytes(raw)
                    name = functions.decode_text(raw, self._value_errors)
                    if name in seen:
                        raise ExtractionError(
                            ExtractionFailure.ENUMERATION_FAILED,
                            bucket=name,
                            detail="bucket names collide after decoding",
                        )
                    seen[name] = raw
                    out.append((raw, name))
        except lmdb.Error as e:
            raise ExtractionError(
                ExtractionFailure.ENUMERATION_FAILED, cause=e
            ) from e
        logger.info("extract.buckets count=%d", len(out))
        return out

    def _read_bucket(
        self, env: lmdb.Environment, raw_name: bytes, name: str
    ) -> BucketEntries:
        entries: BucketEntries = {}
        try:
            with env.begin() as txn:
                # create=False: a bucket that vanished since listing is an error, not a new bucket.
                db = env.open_db(raw_name, txn=txn, create=False)
                if db.flags(txn).get("dupsort"):
                    # One value per key only; extra duplicates would be dropped.
                    raise ExtractionError(
                        ExtractionFailure.NAMESPACE_ACCESS_FAILED,
                        bucket=name,
                        detail="bucket holds duplicate keys",
                    )
                cursor = txn.cursor(db=db)
                for raw_key in cursor.iternext(keys=True, values=False):
                    raw_key = bytes(raw_key)
                    key = functions.hex_key(raw_key)
                    raw_value = self._value_for(txn, db, raw_key)
                    if raw_value is None:
                        raise ExtractionError(
                            ExtractionFailure.MISSING_VALUE, bucket=name, key=key
                        )
                    entries[key] = functions.decode_text(raw_value, self._value_errors)
        except lmdb.Error as e:
            raise ExtractionError(
                ExtractionFailure.NAMESPACE_ACCESS_FAILED, bucket=name, cause=e
            ) from e
        logger.debug("extract.bucket name=%s entries=%d", name, len(entries))
        return entries

    @staticmethod
    def _value_for(txn: lmdb.Transaction, db, raw_key: bytes) -> Optional[bytes]:
        return txn.get(raw_key, db=db)
