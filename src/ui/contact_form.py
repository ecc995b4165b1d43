"""Contact form view backed by a ContactFormController."""

import logging

from nicegui import ui
from pydantic import ValidationError

from src.agent.config import SiteConfig
from src.forms.contact import ContactFormController
from src.models.schemas import FormStatus, ServiceCategory

logger = logging.getLogger(__name__)

# Seconds before a successful form flips back to idle
SUCCESS_RESET_DELAY = 5.0


def render_contact_form(site: SiteConfig) -> ContactFormController:
    """Render the contact form.

    Field values survive an error so the visitor can resubmit as-is.
    They are cleared after a successful submission.

    Returns:
        The controller backing this form instance.
    """
    controller = ContactFormController(
        site.form_endpoint,
        on_change=lambda: render(),
        reset_delay=SUCCESS_RESET_DELAY,
    )
    values = controller.values
    container = ui.column().classes("w-full gap-4")

    def reset() -> None:
        controller.reset()

    async def submit() -> None:
        if controller.is_submitting:
            return
        try:
            submission = controller.validate()
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            ui.notify(f"Please check: {fields}", type="warning")
            return

        status = await controller.submit(submission)
        if status is FormStatus.ERROR:
            logger.info("Contact form left in error state for resubmission")

    def render_success() -> None:
        with ui.column().classes("w-full items-center text-center p-8 gap-4"):
            ui.icon("check_circle").classes("text-5xl text-green-600")
            ui.label("Message Sent!").classes("text-2xl font-bold text-gray-800")
            ui.label(
                f"Thank you for contacting {site.company_name}. "
                "We'll get back to you shortly."
            ).classes("text-gray-600")
            ui.button("Send another message", on_click=reset).props(
                "flat no-caps color=orange-8"
            )

    def render_form() -> None:
        ui.input("Name", placeholder="John Doe").bind_value(values, "name").props(
            "outlined"
        ).classes("w-full")
        ui.input("Email Address", placeholder="john@example.com").bind_value(
            values, "email"
        ).props("outlined type=email").classes("w-full")
        ui.select(
            [category.value for category in ServiceCategory],
            label="Service Interested In",
        ).bind_value(values, "service").props("outlined").classes("w-full")
        ui.textarea(
            "Message", placeholder="Tell us about your project..."
        ).bind_value(values, "message").props("outlined rows=4").classes("w-full")

        if controller.status is FormStatus.ERROR:
            ui.label(
                "Something went wrong. Please try again or email us directly at "
                f"{site.contact_email}"
            ).classes("w-full bg-red-50 text-red-600 p-3 rounded-lg text-sm")

        submitting = controller.status is FormStatus.SUBMITTING
        button = ui.button(
            "Sending..." if submitting else "Send Message", on_click=submit
        ).props("unelevated no-caps color=orange-8 size=lg").classes("w-full")
        if submitting:
            button.props("loading")
            button.disable()

    def render() -> None:
        container.clear()
        with container:
            if controller.status is FormStatus.SUCCESS:
                render_success()
            else:
                render_form()

    render()
    return controller
