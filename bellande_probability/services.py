import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import requests

from bellande_probability.api.schemas import (
    AuthTier,
    CoordinatePayload,
    FunctionPayload,
    ProbabilityPayload,
    make_payload,
)
from bellande_probability.config import settings
from bellande_probability.core.validation import TransportError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}


@dataclass(frozen=True)
class PreparedRequest:
    url: str
    body: dict[str, Any]
    headers: dict[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))


def build_request(
    payload: ProbabilityPayload, tier: AuthTier, base_url: Optional[str] = None
) -> PreparedRequest:
    """Resolve the endpoint and assemble the JSON body for one call.

    The body carries the payload fields in declaration order followed by
    the ``auth`` object of the given tier. Nothing is sent.
    """
    base = base_url or settings.base_url
    if base.endswith("/"):
        base = base[:-1]
    body = payload.model_dump()
    body["auth"] = tier.auth_object()
    return PreparedRequest(url=f"{base}/{tier.endpoint}", body=body)


def dispatch(
    prepared: PreparedRequest,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> Any:
    """POST the prepared request once and return the decoded JSON reply.

    HTTP status is not inspected: any reply whose body decodes as JSON is
    returned verbatim, anything else raises TransportError.
    """
    if timeout is None:
        timeout = settings.timeout
    owns_session = session is None
    if owns_session:
        session = requests.Session()
    try:
        logger.debug("POST %s", prepared.url)
        try:
            r = session.post(
                prepared.url, json=prepared.body, headers=prepared.headers, timeout=timeout
            )
        except requests.RequestException as e:
            logger.error("request to %s failed: %s", prepared.url, e)
            raise TransportError(f"request to {prepared.url} failed: {e}") from e
        if not 200 <= r.status_code < 300:
            logger.warning("%s answered with HTTP %s", prepared.url, r.status_code)
        try:
            return r.json()
        except ValueError as e:
            logger.error("undecodable reply from %s: %s", prepared.url, e)
            raise TransportError(
                f"response from {prepared.url} (HTTP {r.status_code}) is not valid JSON: {e}"
            ) from e
    finally:
        if owns_session:
            session.close()


def request_probability(
    payload: ProbabilityPayload,
    full_auth: bool = False,
    base_url: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> Any:
    prepared = build_request(payload, AuthTier.from_flag(full_auth), base_url=base_url)
    return dispatch(prepared, session=session)


def make_bellande_probability_request(
    mu_func: str,
    sigma_func: str,
    x: Any,
    dimensions: int,
    full_auth: bool = False,
    base_url: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> Any:
    payload = make_payload(
        FunctionPayload, mu_func=mu_func, sigma_func=sigma_func, x=x, dimensions=dimensions
    )
    return request_probability(payload, full_auth=full_auth, base_url=base_url, session=session)


def make_bellande_node_probability_request(
    node0: Any,
    node1: Any,
    threshold: float,
    dimensions: int,
    full_auth: bool = False,
    base_url: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> Any:
    payload = make_payload(
        CoordinatePayload, node0=node0, node1=node1, threshold=threshold, dimensions=dimensions
    )
    return request_probability(payload, full_auth=full_auth, base_url=base_url, session=session)
