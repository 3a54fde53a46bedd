"""SoftLayer REST API transport for VLAN inventory queries."""

from __future__ import annotations

import re
from types import TracebackType
from typing import Any, Self

import requests
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from netinventory.generate_subnets.exceptions import APIError, AuthenticationError
from netinventory.generate_subnets.models import RawVlan

SOFTLAYER_REST_ENDPOINT = "https://api.softlayer.com/rest/v3.1"

# Object mask limiting getNetworkVlans to the fields the inventory needs
NETWORK_VLAN_MASK = """mask[id,name,vlanNumber,fullyQualifiedName,
subnets[id,ipAddressCount,gateway,cidr,netmask,networkIdentifier,subnetType,
ipAddresses[ipAddress,isNetwork,isBroadcast,isGateway]],
primaryRouter[hostname]]"""

_VLAN_LIST = TypeAdapter(list[RawVlan])


class SoftLayerRESTTransport:
    """HTTP REST transport using SoftLayer API key (basic) authentication.

    One transport is bound to one account; the session is opened by
    ``connect()`` or by using the transport as a context manager.
    """

    def __init__(
        self,
        username: str,
        api_key: str,
        endpoint_url: str = SOFTLAYER_REST_ENDPOINT,
        timeout: float = 60.0,
    ):
        self.username = username
        self.api_key = api_key
        self.endpoint_url = endpoint_url.rstrip("/")
        self.timeout = timeout
        self._session: requests.Session | None = None

    def connect(self) -> None:
        """Open an authenticated HTTP session."""
        self._session = requests.Session()
        self._session.auth = (self.username, self.api_key)
        self._session.headers["Accept"] = "application/json"

    def disconnect(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def is_connected(self) -> bool:
        return self._session is not None

    def __enter__(self) -> Self:
        self.connect()
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        self.disconnect()

    def call(self, service: str, method: str, object_mask: str | None = None) -> Any:
        """Invoke ``service::method`` and return the decoded JSON payload.

        Args:
            service: SoftLayer service name (e.g. "SoftLayer_Account").
            method: Service method (e.g. "getNetworkVlans").
            object_mask: Optional object mask restricting the returned fields.
        """
        if not self.is_connected():
            raise APIError("Not connected. Call connect() first.")
        assert self._session is not None

        url = f"{self.endpoint_url}/{service}/{method}.json"
        params = {"objectMask": re.sub(r"\s+", "", object_mask)} if object_mask else None
        try:
            resp = self._session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise APIError(f"{service}::{method} failed: {e}") from e

        if resp.status_code in (401, 403):
            raise AuthenticationError(
                f"{service}::{method} rejected credentials for {self.username}", status_code=resp.status_code
            )
        try:
            resp.raise_for_status()
        except requests.RequestException as e:
            raise APIError(f"{service}::{method} failed: {e}", status_code=resp.status_code) from e

        try:
            return resp.json()
        except ValueError as e:
            raise APIError(f"{service}::{method} returned invalid JSON: {e}", status_code=resp.status_code) from e

    def get_network_vlans(self) -> list[RawVlan]:
        """Fetch all VLANs of the account with their subnets and primary router."""
        data = self.call("SoftLayer_Account", "getNetworkVlans", object_mask=NETWORK_VLAN_MASK)
        if not isinstance(data, list):
            raise APIError(f"SoftLayer_Account::getNetworkVlans returned {type(data).__name__}, expected list")
        try:
            vlans = _VLAN_LIST.validate_python(data)
        except ValidationError as e:
            raise APIError(f"SoftLayer_Account::getNetworkVlans returned malformed VLAN records: {e}") from e
        logger.debug(f"{self.username}: fetched {len(vlans)} VLANs")
        return vlans
