"""
Google Compute Engine Driver Implementation.

Talks to the Compute Engine REST API (v1) with aiohttp. Firewall inserts and
deletes return a global operation; a background task polls it until it is
DONE and resolves the PendingOperation handed to the caller.
"""
import asyncio
import logging
from typing import Any, Optional

import aiohttp

from core.application.interfaces import IComputeDriver
from core.domain.entities import FirewallRule
from core.domain.errors import FirewallRuleOperationError, FirewallRuleSubmissionError
from core.domain.value_objects.operation import PendingOperation
from core.settings.modules.google_settings import GoogleComputeSettings


logger = logging.getLogger(__name__)


class GoogleComputeDriver(IComputeDriver):
    """
    Compute Engine implementation of the compute driver.

    Usage:
        async with GoogleComputeDriver(settings) as driver:
            operation = await driver.create_firewall_rule(rule)
            result = await operation.wait(300)
    """

    def __init__(
        self,
        settings: GoogleComputeSettings,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize Compute Engine driver.

        Args:
            settings: Project, credentials and API endpoint
            session: Shared aiohttp session (the driver creates its own otherwise)
        """
        self.settings = settings
        self.project_id = settings.project_id
        self.base_url = settings.api_base_url.rstrip("/")
        self.poll_interval = settings.poll_interval
        self._session = session
        self._owns_session = session is None
        self._poll_tasks: set[asyncio.Task] = set()
        logger.info(f"GoogleComputeDriver initialized for project {self.project_id}")

    async def __aenter__(self) -> "GoogleComputeDriver":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Stop polling and close the session if the driver created it."""
        for task in list(self._poll_tasks):
            task.cancel()
        if self._poll_tasks:
            await asyncio.gather(*self._poll_tasks, return_exceptions=True)
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    # ------------------------------------------------------------------
    # IComputeDriver
    # ------------------------------------------------------------------

    async def create_firewall_rule(self, rule: FirewallRule) -> PendingOperation:
        data = await self._submit(
            "POST", self._project_url("global/firewalls"), self.firewall_body(rule)
        )
        return self._track(data, f"create firewall rule {rule.name}")

    async def delete_firewall_rule(self, name: str) -> PendingOperation:
        data = await self._submit("DELETE", self._project_url(f"global/firewalls/{name}"))
        return self._track(data, f"delete firewall rule {name}")

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    def firewall_body(self, rule: FirewallRule) -> dict[str, Any]:
        """Map a FirewallRule to the Compute Engine Firewall resource."""
        body: dict[str, Any] = {
            "name": rule.name,
            "description": rule.description,
            "network": self._network_url(rule.network),
            "allowed": [
                {
                    "IPProtocol": rule.allowed.ip_protocol,
                    "ports": list(rule.allowed.ports),
                }
            ],
            "sourceRanges": list(rule.source_ranges),
        }
        if rule.target_tags:
            body["targetTags"] = list(rule.target_tags)
        return body

    def _network_url(self, network: str) -> str:
        # Full or partial resource URLs are passed through untouched
        if "/" in network:
            return network
        return f"projects/{self.project_id}/global/networks/{network}"

    def _project_url(self, path: str) -> str:
        return f"{self.base_url}/projects/{self.project_id}/{path}"

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.settings.access_token:
            headers["Authorization"] = f"Bearer {self.settings.access_token}"
        return headers

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def _request(
        self, method: str, url: str, body: Optional[dict[str, Any]] = None
    ) -> tuple[int, dict[str, Any]]:
        """
        Send one API request.

        Returns:
            HTTP status and decoded JSON body (empty dict when there is none)
        """
        session = self._get_session()
        async with session.request(method, url, json=body, headers=self._headers()) as response:
            try:
                data = await response.json(content_type=None)
            except ValueError:
                data = {"error": {"message": await response.text()}}
            return response.status, data or {}

    async def _submit(
        self, method: str, url: str, body: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        try:
            status, data = await self._request(method, url, body)
        except aiohttp.ClientError as e:
            raise FirewallRuleSubmissionError(f"{method} {url} failed: {e}") from e

        if status >= 400:
            raise FirewallRuleSubmissionError(_api_error_message(status, data))
        return data

    # ------------------------------------------------------------------
    # Operation tracking
    # ------------------------------------------------------------------

    def _track(self, data: dict[str, Any], description: str) -> PendingOperation:
        operation = PendingOperation(description)
        if data.get("status") == "DONE":
            _resolve(operation, data)
            return operation

        task = asyncio.create_task(self._poll(operation, data.get("name")))
        self._poll_tasks.add(task)
        task.add_done_callback(self._poll_tasks.discard)
        return operation

    async def _poll(self, operation: PendingOperation, operation_name: Optional[str]) -> None:
        if not operation_name:
            operation.fail(FirewallRuleOperationError(
                f"{operation.description}: response carried no operation name"
            ))
            return

        url = self._project_url(f"global/operations/{operation_name}")
        try:
            while True:
                await asyncio.sleep(self.poll_interval)
                status, data = await self._request("GET", url)
                if status >= 400:
                    operation.fail(FirewallRuleOperationError(
                        _api_error_message(status, data), operation=operation_name
                    ))
                    return
                if data.get("status") == "DONE":
                    _resolve(operation, data)
                    return
                logger.debug(f"Operation {operation_name} is {data.get('status')}")
        except asyncio.CancelledError:
            operation.fail(FirewallRuleOperationError(
                f"stopped polling operation {operation_name}", operation=operation_name
            ))
            raise
        except Exception as e:
            logger.error(f"Polling operation {operation_name} failed: {e}", exc_info=True)
            operation.fail(e)


def _api_error_message(status: int, data: dict[str, Any]) -> str:
    error = data.get("error") or {}
    message = error.get("message") if isinstance(error, dict) else str(error)
    return f"Compute API error {status}: {message or 'no details'}"


def _resolve(operation: PendingOperation, data: dict[str, Any]) -> None:
    """Resolve a pending operation from a DONE Compute operation resource."""
    errors = [
        entry.get("message") or entry.get("code") or "unknown error"
        for entry in (data.get("error") or {}).get("errors", [])
    ]
    if errors:
        operation.fail(FirewallRuleOperationError(
            "; ".join(errors), operation=data.get("name"), errors=errors
        ))
    else:
        operation.succeed()
