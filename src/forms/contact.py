"""Contact form submission to the third-party form-intake endpoint.

The endpoint is Formspree-compatible: form fields in the body, JSON
requested through the Accept header. Success is read from the HTTP status
alone; the response body is never parsed.
"""

import asyncio
import logging
from collections.abc import Callable

import httpx

from src.models.schemas import ContactSubmission, FormStatus, ServiceCategory

logger = logging.getLogger(__name__)


async def submit_contact_form(
    submission: ContactSubmission,
    endpoint: str,
    client: httpx.AsyncClient | None = None,
) -> bool:
    """Post a contact submission to the form-intake endpoint.

    Args:
        submission: Validated form payload.
        endpoint: Form-intake URL.
        client: Optional client to reuse; a short-lived one is created otherwise.

    Returns:
        True if the endpoint answered with a 2xx status, False otherwise.
    """
    try:
        if client is None:
            async with httpx.AsyncClient() as owned_client:
                response = await _post(owned_client, submission, endpoint)
        else:
            response = await _post(client, submission, endpoint)
    except httpx.RequestError as e:
        logger.warning(f"Contact form request failed: {e}")
        return False

    if not response.is_success:
        logger.warning(f"Form endpoint rejected submission: HTTP {response.status_code}")
        return False

    logger.info(f"Contact form submitted for service '{submission.service.value}'")
    return True


async def _post(
    client: httpx.AsyncClient, submission: ContactSubmission, endpoint: str
) -> httpx.Response:
    return await client.post(
        endpoint,
        data=submission.to_form_data(),
        headers={"Accept": "application/json"},
    )


def empty_form_values() -> dict[str, str]:
    """Blank field values, with the first service preselected."""
    return {
        "name": "",
        "email": "",
        "service": ServiceCategory.WEBSITE_DEVELOPMENT.value,
        "message": "",
    }


class ContactFormController:
    """Field values and submission status for one contact form instance.

    Status moves idle -> submitting -> success | error. Errors are terminal
    until the visitor submits again; there is no automatic retry. Field
    values are kept as typed on error and cleared on success.
    """

    def __init__(
        self,
        endpoint: str,
        client: httpx.AsyncClient | None = None,
        on_change: Callable[[], None] | None = None,
        reset_delay: float | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            endpoint: Form-intake URL.
            client: Optional HTTP client, mainly for tests.
            on_change: Called after every status change.
            reset_delay: Seconds after a success before returning to idle.
                None leaves the success state until reset() is called.
        """
        self.endpoint = endpoint
        self._client = client
        self._on_change = on_change
        self._reset_delay = reset_delay
        self._reset_handle: asyncio.TimerHandle | None = None
        self.values = empty_form_values()
        self.status = FormStatus.IDLE

    @property
    def is_submitting(self) -> bool:
        return self.status is FormStatus.SUBMITTING

    def _set_status(self, status: FormStatus) -> None:
        self.status = status
        if self._on_change is not None:
            self._on_change()

    def validate(self) -> ContactSubmission:
        """Build a submission from the current field values.

        Raises:
            ValidationError: If a field is missing or malformed.
        """
        return ContactSubmission.model_validate(self.values)

    async def submit(self, submission: ContactSubmission) -> FormStatus:
        """Submit the form and record the outcome.

        Ignored while a submission is already in flight.

        Returns:
            The resulting status.
        """
        if self.is_submitting:
            return self.status

        self._set_status(FormStatus.SUBMITTING)
        ok = False
        try:
            ok = await submit_contact_form(submission, self.endpoint, client=self._client)
        finally:
            if ok:
                self.values.update(empty_form_values())
                self._schedule_reset()
            self._set_status(FormStatus.SUCCESS if ok else FormStatus.ERROR)
        return self.status

    def _schedule_reset(self) -> None:
        if self._reset_delay is None:
            return
        self._cancel_reset()
        loop = asyncio.get_running_loop()
        self._reset_handle = loop.call_later(self._reset_delay, self.reset)

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def reset(self) -> None:
        """Return to idle so another message can be sent."""
        self._cancel_reset()
        if not self.is_submitting and self.status is not FormStatus.IDLE:
            self._set_status(FormStatus.IDLE)
