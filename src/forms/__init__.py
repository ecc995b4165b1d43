"""Contact form handling: validation lives in the models, delivery here."""

from src.forms.contact import ContactFormController, submit_contact_form

__all__ = ["ContactFormController", "submit_contact_form"]
