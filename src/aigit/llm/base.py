"""Shared pieces of the provider HTTP adapters."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, ClassVar, Protocol

import requests

from .errors import ProviderError

logger = logging.getLogger(__name__)


class Provider(Protocol):
	"""A backend that can draft a commit message from a diff."""

	name: ClassVar[str]

	def generate(self, diff: str, context: str) -> str:
		"""Return the raw generated commit message."""
		...


def post_json(
	url: str,
	payload: dict[str, Any],
	*,
	label: str,
	headers: dict[str, str] | None = None,
	params: dict[str, str] | None = None,
	timeout: float | None = None,
) -> requests.Response:
	"""
	Send one JSON POST request to a provider.

	Args:
	    url: Endpoint URL
	    payload: JSON body
	    label: Provider display name used in errors
	    headers: Extra request headers
	    params: Query string parameters
	    timeout: Seconds to wait, or None to wait indefinitely

	Returns:
	    The response, whatever its status

	Raises:
	    ProviderError: If the request could not be sent or no response arrived

	"""
	request_headers = {"Content-Type": "application/json"}
	if headers:
		request_headers.update(headers)

	logger.debug("POST %s (%s)", url, label)
	try:
		return requests.post(url, json=payload, headers=request_headers, params=params, timeout=timeout)
	except requests.RequestException as e:
		msg = f"request failed: {e}"
		raise ProviderError(msg, provider=label) from e


def is_success(response: requests.Response) -> bool:
	"""Return True for 2xx responses."""
	return HTTPStatus.OK <= response.status_code < HTTPStatus.MULTIPLE_CHOICES


def decode_error_envelope(response: requests.Response) -> dict[str, Any] | None:
	"""Best-effort decode of an error response body; None when it is not a JSON object."""
	try:
		data = response.json()
	except ValueError:
		return None
	return data if isinstance(data, dict) else None


def decode_response(response: requests.Response, label: str) -> dict[str, Any]:
	"""
	Decode a successful response body.

	Raises:
	    ProviderError: If the body is not a JSON object

	"""
	try:
		data = response.json()
	except ValueError as e:
		msg = f"could not decode response: {e}"
		raise ProviderError(msg, provider=label) from e
	if not isinstance(data, dict):
		msg = f"unexpected response: {response.text}"
		raise ProviderError(msg, provider=label)
	return data


def raw_error(response: requests.Response, label: str) -> ProviderError:
	"""Build the error used when the provider's error envelope is missing or empty."""
	logger.debug("%s returned HTTP %s without a usable error envelope", label, response.status_code)
	return ProviderError(response.text, provider=label)


def first_item(value: Any) -> Any:  # noqa: ANN401
	"""Return the first element of a list, or None for anything else."""
	if isinstance(value, list) and value:
		return value[0]
	return None
