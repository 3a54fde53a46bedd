"""Pydantic models for SoftLayer VLAN records and the enriched subnet inventory."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# owner username -> router hostname -> vCenter identifiers
EndpointMap = dict[str, dict[str, list[str]]]

# lower-cased credential file key -> AccountCredential field
_CREDENTIAL_KEYS = {"username": "username", "apitoken": "api_token", "api_token": "api_token"}


class AccountCredential(BaseModel):
    """SoftLayer API credentials for one account owner.

    Keys are matched case-insensitively (``Username``, ``USERNAME``, ``apiToken``,
    ``APITOKEN`` ...); when several keys match the same field the last one wins.
    """

    username: str
    api_token: str

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        matched: dict[str, Any] = {}
        for key, value in data.items():
            field = _CREDENTIAL_KEYS.get(key.lower()) if isinstance(key, str) else None
            if field is not None:
                matched[field] = value
        return matched


# ── Raw records as returned by SoftLayer_Account::getNetworkVlans ─────


class _RawRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RawIpAddress(_RawRecord):
    ip_address: Optional[str] = Field(default=None, alias="ipAddress")
    is_network: Optional[bool] = Field(default=None, alias="isNetwork")
    is_broadcast: Optional[bool] = Field(default=None, alias="isBroadcast")
    is_gateway: Optional[bool] = Field(default=None, alias="isGateway")


class RawSubnet(_RawRecord):
    id: Optional[int] = None
    ip_address_count: Optional[int] = Field(default=None, alias="ipAddressCount")
    gateway: Optional[str] = None
    cidr: Optional[int] = None
    netmask: Optional[str] = None
    network_identifier: Optional[str] = Field(default=None, alias="networkIdentifier")
    subnet_type: Optional[str] = Field(default=None, alias="subnetType")
    ip_addresses: list[RawIpAddress] = Field(default_factory=list, alias="ipAddresses")


class PrimaryRouter(_RawRecord):
    hostname: Optional[str] = None


class RawVlan(_RawRecord):
    id: Optional[int] = None
    name: Optional[str] = None
    vlan_number: Optional[int] = Field(default=None, alias="vlanNumber")
    fully_qualified_name: Optional[str] = Field(default=None, alias="fullyQualifiedName")
    subnets: list[RawSubnet] = Field(default_factory=list)
    primary_router: Optional[PrimaryRouter] = Field(default=None, alias="primaryRouter")


# ── Enriched output ───────────────────────────────────────────────────


class IPv6Fields(BaseModel):
    """Deterministic IPv6 addressing derived from a VLAN number."""

    prefix: str
    gateway: str
    start: str
    stop: str
    link_local: str
    link_local_prefix_length: int = 64
    prefix_length: int = 64


class EnrichedSubnet(BaseModel):
    """One subnet entry of the generated inventory file.

    Serialized with ``by_alias=True`` the keys match what the provisioning
    tooling reads from ``subnets.json``.
    """

    model_config = ConfigDict(populate_by_name=True)

    cidr: int
    dns_server: str = Field(alias="dnsServer")
    machine_network_cidr: str = Field(alias="machineNetworkCidr")
    gateway: str
    mask: str
    network: str
    ip_addresses: list[str] = Field(default_factory=list, alias="ipAddresses")
    virtual_center: str = Field(default="", alias="virtualcenter")

    ipv6_prefix: str = Field(alias="ipv6prefix")
    start_ipv6_address: str = Field(alias="StartIPv6Address")
    stop_ipv6_address: str = Field(alias="StopIPv6Address")
    link_local_ipv6: str = Field(alias="LinkLocalIPv6")
    cidr_ipv6: int = Field(alias="CidrIPv6")
    gateway_ipv6: str = Field(alias="gatewayipv6")
