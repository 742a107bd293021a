"""Portfolio reader: batch balance and label lookups over token contracts."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..common import abi_types, abi_utils, constants
from ..common.abi_types import EntryPoint
from ..common.errors import AlreadyInitialized
from ..common.transport import ContractCaller
from ..common.validation import ensure_address

logger = logging.getLogger(__name__)


class PortfolioReader:
    """Fan out one read per token and return results aligned with the input.

    A token that cannot be read (no code, revert, undecodable return data,
    transport error or timeout) gets the default for its field: ``0`` for
    balances and ``""`` for labels. Callers must treat a default slot as
    unreadable rather than as a real zero balance or blank label.

    Without ``call_timeout`` and with ``max_workers == 1`` calls are issued
    one at a time in input order on the calling thread. Otherwise they run on
    a thread pool of up to ``max_workers`` threads, and ``call_timeout``
    bounds the whole fan-out whatever the worker count.

    A timed-out call is abandoned, not interrupted: its worker thread keeps
    running until the transport returns, and the interpreter joins such
    threads at exit. Give the transport its own timeout no longer than
    ``call_timeout`` so an abandoned call cannot outlive the process.
    """

    ENTRY_POINTS = abi_types.READER_INTERFACE

    def __init__(
        self,
        caller: ContractCaller,
        max_workers: int = constants.DEFAULT_MAX_WORKERS,
        call_timeout: Optional[float] = None,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._caller = caller
        self._max_workers = max_workers
        self._call_timeout = call_timeout
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        if self._initialized:
            raise AlreadyInitialized(constants.ALREADY_INITIALIZED_MESSAGE)
        self._initialized = True

    # The batch reads do not consult the initialization flag.

    def get_balances(self, user: str, tokens: Iterable[str]) -> List[int]:
        account = ensure_address(user)
        return self._fan_out(
            tokens, abi_types.ERC20_BALANCE_OF, (account,), constants.DEFAULT_BALANCE
        )

    def get_symbols(self, tokens: Iterable[str]) -> List[str]:
        return self._fan_out(tokens, abi_types.ERC20_SYMBOL, (), constants.DEFAULT_LABEL)

    def get_names(self, tokens: Iterable[str]) -> List[str]:
        return self._fan_out(tokens, abi_types.ERC20_NAME, (), constants.DEFAULT_LABEL)

    def _fan_out(
        self,
        tokens: Iterable[str],
        entry: EntryPoint,
        args: Tuple[Any, ...],
        default: Any,
    ) -> List[Any]:
        targets = list(tokens)
        if not targets:
            return []
        if self._call_timeout is None and (self._max_workers <= 1 or len(targets) == 1):
            return [self._read_one(token, entry, args, default) for token in targets]
        return self._fan_out_concurrent(targets, entry, args, default)

    def _fan_out_concurrent(
        self,
        targets: Sequence[str],
        entry: EntryPoint,
        args: Tuple[Any, ...],
        default: Any,
    ) -> List[Any]:
        results: List[Any] = [default] * len(targets)
        pool = ThreadPoolExecutor(max_workers=max(1, min(self._max_workers, len(targets))))
        try:
            futures = {
                pool.submit(self._read_one, token, entry, args, default): index
                for index, token in enumerate(targets)
            }
            done, pending = wait(futures, timeout=self._call_timeout)
            for future in done:
                results[futures[future]] = future.result()
            for future in pending:
                index = futures[future]
                logger.warning(
                    "%s on %s timed out after %ss; using default",
                    entry.name,
                    targets[index],
                    self._call_timeout,
                )
        finally:
            pool.shutdown(wait=False, cancel_futures=True)
        return results

    def _read_one(self, token: Any, entry: EntryPoint, args: Tuple[Any, ...], default: Any) -> Any:
        try:
            target = ensure_address(token)
            data = self._caller.call(target, abi_utils.encode_call(entry, *args))
            return abi_utils.decode_result(entry, data)
        except Exception as exc:  # noqa: BLE001 - a failing target only affects its own slot
            logger.debug("%s on %r unreadable (%s); using default", entry.name, token, exc)
            return default
