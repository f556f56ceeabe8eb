"""Solana JSON-RPC account source.

AccountSource is the protocol the pool and token services depend on, so
tests can swap in an in-memory source. SolanaRpcClient implements it over
HTTP with httpx.
"""

from __future__ import annotations

import base64
import itertools
from collections.abc import Sequence
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Protocol

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from pumpswap.errors import DecodeError, QueryError

logger = structlog.get_logger()

# getMultipleAccounts accepts at most 100 keys per request
MAX_MULTIPLE_ACCOUNTS = 100


@dataclass(frozen=True)
class MemcmpFilter:
    """Match accounts whose data at `offset` equals the base58 `bytes`."""

    offset: int
    bytes: str

    def to_rpc(self) -> dict[str, Any]:
        return {"memcmp": {"offset": self.offset, "bytes": self.bytes}}


@dataclass(frozen=True)
class DataSizeFilter:
    """Match accounts whose data length is exactly `size` bytes."""

    size: int

    def to_rpc(self) -> dict[str, Any]:
        return {"dataSize": self.size}


AccountFilter = MemcmpFilter | DataSizeFilter


@dataclass(frozen=True)
class KeyedAccount:
    """Raw account data together with its address."""

    address: str
    data: bytes


class AccountSource(Protocol):
    """Read-only account queries consumed by the SDK core."""

    async def get_program_accounts(
        self, program_id: str, filters: Sequence[AccountFilter]
    ) -> list[KeyedAccount]:
        """Return all accounts owned by `program_id` matching every filter.

        Raises:
            QueryError: If the query could not be completed
        """
        ...

    async def get_account_info(self, address: str) -> bytes | None:
        """Return raw account data, or None if the account does not exist."""
        ...

    async def get_multiple_accounts(self, addresses: Sequence[str]) -> list[bytes | None]:
        """Return raw data for each address, in order (None where absent)."""
        ...


class WalletSource(AccountSource, Protocol):
    """Account queries plus native balance lookups."""

    async def get_balance(self, address: str) -> int:
        """Lamport balance of an account."""
        ...


class RpcErrorDetail(BaseModel):
    code: int
    message: str
    data: Any = None


class RpcResponse(BaseModel):
    """JSON-RPC 2.0 response envelope."""

    jsonrpc: str = "2.0"
    id: int | str | None = None
    result: Any = None
    error: RpcErrorDetail | None = None


def decode_account_data(data: Any) -> bytes:
    """Decode the `data` field of an RPC account with base64 encoding.

    Raises:
        DecodeError: If the field is not a [payload, "base64"] pair
    """
    if not isinstance(data, list) or len(data) != 2 or data[1] != "base64":
        raise DecodeError(f"Unexpected account data encoding: {data!r}")
    try:
        return base64.b64decode(data[0])
    except (ValueError, TypeError) as err:
        raise DecodeError(f"Invalid base64 account data: {err}") from err


class SolanaRpcClient:
    """Async Solana JSON-RPC client.

    Usage:
        async with SolanaRpcClient("https://api.mainnet-beta.solana.com") as rpc:
            accounts = await rpc.get_program_accounts(program_id, filters)
    """

    def __init__(
        self,
        endpoint: str,
        commitment: str = "confirmed",
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            endpoint: HTTP RPC URL
            commitment: Commitment level sent with every read
            timeout: HTTP timeout in seconds (ignored if `client` is given)
            client: Pre-built httpx client (e.g. with a mock transport)
        """
        self.endpoint = endpoint
        self.commitment = commitment
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._ids = itertools.count(1)

    async def __aenter__(self) -> SolanaRpcClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def call(self, method: str, params: list[Any] | None = None) -> Any:
        """Send a JSON-RPC request and return its `result`.

        Raises:
            QueryError: On transport failure, HTTP error status, malformed
                response, or a JSON-RPC error object
        """
        request_id = next(self._ids)
        payload = {"jsonrpc": "2.0", "id": request_id, "method": method, "params": params or []}
        try:
            response = await self._client.post(self.endpoint, json=payload)
            response.raise_for_status()
            envelope = RpcResponse.model_validate(response.json())
        except httpx.HTTPError as err:
            logger.warning("rpc_request_failed", method=method, error=str(err))
            raise QueryError(f"{method} failed: {err}") from err
        except (ValueError, ValidationError) as err:
            logger.warning("rpc_response_invalid", method=method, error=str(err))
            raise QueryError(f"{method} returned an invalid response: {err}") from err

        if envelope.error is not None:
            logger.warning(
                "rpc_error",
                method=method,
                code=envelope.error.code,
                message=envelope.error.message,
            )
            raise QueryError(f"{method} error {envelope.error.code}: {envelope.error.message}")
        return envelope.result

    # --- AccountSource ---

    async def get_program_accounts(
        self, program_id: str, filters: Sequence[AccountFilter]
    ) -> list[KeyedAccount]:
        result = await self.call(
            "getProgramAccounts",
            [
                program_id,
                {
                    "encoding": "base64",
                    "commitment": self.commitment,
                    "filters": [f.to_rpc() for f in filters],
                },
            ],
        )
        if not isinstance(result, list):
            raise QueryError(f"getProgramAccounts returned {type(result).__name__}, expected list")
        try:
            return [
                KeyedAccount(
                    address=item["pubkey"], data=decode_account_data(item["account"]["data"])
                )
                for item in result
            ]
        except (KeyError, TypeError) as err:
            raise QueryError(f"getProgramAccounts returned a malformed account: {err}") from err

    async def get_account_info(self, address: str) -> bytes | None:
        result = await self.call(
            "getAccountInfo",
            [address, {"encoding": "base64", "commitment": self.commitment}],
        )
        value = _unwrap_value(result, "getAccountInfo")
        if value is None:
            return None
        return decode_account_data(value["data"])

    async def get_multiple_accounts(self, addresses: Sequence[str]) -> list[bytes | None]:
        accounts: list[bytes | None] = []
        for start in range(0, len(addresses), MAX_MULTIPLE_ACCOUNTS):
            chunk = list(addresses[start : start + MAX_MULTIPLE_ACCOUNTS])
            result = await self.call(
                "getMultipleAccounts",
                [chunk, {"encoding": "base64", "commitment": self.commitment}],
            )
            values = _unwrap_value(result, "getMultipleAccounts")
            if not isinstance(values, list) or len(values) != len(chunk):
                raise QueryError("getMultipleAccounts returned a mismatched account list")
            accounts.extend(
                None if value is None else decode_account_data(value["data"]) for value in values
            )
        return accounts

    # --- Wallet and transaction helpers ---

    async def get_balance(self, address: str) -> int:
        """Lamport balance of an account."""
        result = await self.call("getBalance", [address, {"commitment": self.commitment}])
        return int(_unwrap_value(result, "getBalance"))

    async def get_latest_blockhash(self) -> str:
        """Most recent blockhash (base58)."""
        result = await self.call("getLatestBlockhash", [{"commitment": self.commitment}])
        return str(_unwrap_value(result, "getLatestBlockhash")["blockhash"])

    async def get_block_height(self) -> int:
        result = await self.call("getBlockHeight", [{"commitment": self.commitment}])
        return int(result)

    async def send_transaction(self, raw_transaction: bytes, skip_preflight: bool = False) -> str:
        """Submit a signed, serialized transaction and return its signature."""
        encoded = base64.b64encode(raw_transaction).decode("ascii")
        result = await self.call(
            "sendTransaction",
            [
                encoded,
                {
                    "encoding": "base64",
                    "skipPreflight": skip_preflight,
                    "preflightCommitment": self.commitment,
                },
            ],
        )
        return str(result)


async def validate_connection(rpc: SolanaRpcClient) -> bool:
    """Check that the RPC node answers; logs the current block height."""
    try:
        block_height = await rpc.get_block_height()
    except QueryError as err:
        logger.error("connection_validation_failed", endpoint=rpc.endpoint, error=str(err))
        return False
    logger.info("connection_validated", endpoint=rpc.endpoint, block_height=block_height)
    return True


def _unwrap_value(result: Any, method: str) -> Any:
    """Extract `value` from an RpcResponse-with-context result."""
    if not isinstance(result, dict) or "value" not in result:
        raise QueryError(f"{method} returned a result without a value field")
    return result["value"]
