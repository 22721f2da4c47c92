"""Menu-driven workflow for tenants.

:class:`MenuController` is a small state machine over the screens in
:mod:`rental_space.ui`. Blank input means "go back" on every sub-screen and
invalid input redisplays an error screen; the loop only ends through the
Exit option or when standard input is closed.
"""

import logging
import re
from typing import Callable, Sequence

from rental_space.exceptions import ApplicationRejectedError, StoreError
from rental_space.models import Property
from rental_space.session import Session
from rental_space.ui import ConsoleUI
from rental_space.validation import (
    validate_email,
    validate_name,
    validate_phone_number,
    validate_savings,
)

logger = logging.getLogger(__name__)

GUEST_MENU = ("Login", "Exit")
TENANT_MENU = ("Browse Property", "Wishlist", "Contact", "Logout")

INVALID_FIRST_NAME = "Invalid first name. Please enter a name with no more than 255 characters."
INVALID_LAST_NAME = "Invalid last name. Please enter a name with no more than 255 characters."
INVALID_EMAIL = "Invalid email format. Please use your Monash student email."
INVALID_PHONE = "Invalid phone number. Please enter a valid Australian mobile number."
INVALID_SAVINGS = "Invalid savings amount. Please enter a valid number."

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _as_int(text: str) -> int | None:
    """Parse a menu number: ASCII digits with an optional sign, nothing else."""
    if INTEGER_PATTERN.fullmatch(text) is None:
        return None
    return int(text)


class MenuController:
    """Dispatch menu choices to session operations.

    Parameters
    ----------
    session : Session
        Records and current tenant.
    ui : ConsoleUI
        Screen renderer and line reader.
    """

    def __init__(self, session: Session, ui: ConsoleUI) -> None:
        self.session = session
        self.ui = ui

    def run(self) -> None:
        """Run until the user picks Exit or input is closed."""
        logger.info("Starting menu loop")
        exit_requested = False
        while not exit_requested and not self.ui.closed:
            if self.session.is_authenticated:
                self.authenticated_home()
            else:
                exit_requested = self.unauthenticated_home()
        if self.ui.closed:
            logger.info("Input closed, stopping")
        logger.info("Menu loop finished")

    # --- Home screens ---

    def unauthenticated_home(self) -> bool:
        """Guest menu. Returns True when the user chooses Exit."""
        self.ui.display_home_screen(GUEST_MENU)
        choice = self.ui.prompt(f"Input (1 - {len(GUEST_MENU)})")

        if choice == "1":
            self.login()
        elif choice == "2":
            return True
        elif not self.ui.closed:
            self.ui.display_invalid_option_error(len(GUEST_MENU))
            self.ui.pause()
        return False

    def authenticated_home(self) -> None:
        tenant = self.session.require_tenant()
        self.ui.display_home_screen(TENANT_MENU, tenant)
        choice = self.ui.prompt(f"Input (1 - {len(TENANT_MENU)})")

        if choice == "1":
            self.property_list(
                lambda: self.session.store.properties,
                self.ui.display_property_search_screen,
            )
        elif choice == "2":
            self.property_list(
                self.session.wishlist_properties,
                self.ui.display_wishlist_screen,
            )
        elif choice == "3":
            self.ui.display_contact_screen()
            self.ui.pause()
        elif choice == "4":
            self.session.logout()
        elif not self.ui.closed:
            self.ui.display_invalid_option_error(len(TENANT_MENU))
            self.ui.pause()

    # --- Login ---

    def login(self) -> None:
        """Prompt for credentials until login succeeds or the user goes back."""
        while not self.ui.closed:
            self.ui.display_login_screen()

            self.ui.print_leave_blank_to_return()
            while True:
                email = self.ui.prompt("Email")
                if not email.strip():
                    return
                if validate_email(email):
                    break
                self.ui.print_text(INVALID_EMAIL)

            self.ui.print_leave_blank_to_return()
            password = self.ui.prompt("Password")
            if not password.strip():
                return

            if self.session.login(email, password):
                return

            self.ui.display_login_failed()
            self.ui.pause()

    # --- Property screens ---

    def property_list(
        self,
        properties_supplier: Callable[[], Sequence[Property]],
        display: Callable[..., None],
    ) -> None:
        """Browse or wishlist screen.

        The list is re-read from ``properties_supplier`` on every pass so
        wishlist removals are reflected immediately.
        """
        while not self.ui.closed:
            tenant = self.session.require_tenant()
            properties = list(properties_supplier())
            display(properties, self.session.store, tenant)
            choice = self.ui.prompt()
            action = choice.strip().lower()
            num = _as_int(choice)

            if action in ("a", "b"):
                if not properties:
                    self.ui.display_no_properties()
                    self.ui.pause()
                    return
                self._property_action(action, properties)
            elif num is not None:
                if 1 <= num <= len(properties):
                    self.property_details(properties[num - 1])
                else:
                    self.ui.display_invalid_number_error()
                    self.ui.pause()
            elif not choice.strip():
                return
            else:
                self.ui.display_invalid_letter_error()
                self.ui.pause()

    def _property_action(self, action: str, properties: Sequence[Property]) -> None:
        selection = self.ui.prompt(f"Property no. (1 - {len(properties)})")
        num = _as_int(selection)
        if num is None:
            if selection.strip():
                self.ui.display_invalid_letter_error()
                self.ui.pause()
            return
        if not 1 <= num <= len(properties):
            self.ui.display_invalid_number_error()
            self.ui.pause()
            return

        prop = properties[num - 1]
        if action == "a":
            self.toggle_wishlist(prop)
        else:
            self.application_form(prop)

    def property_details(self, prop: Property) -> None:
        while not self.ui.closed:
            self.ui.display_property_details_screen(prop, self.session.is_wishlisted(prop))
            choice = self.ui.prompt()

            if choice == "1":
                self.toggle_wishlist(prop)
            elif choice == "2":
                self.application_form(prop)
            elif not choice.strip():
                return
            else:
                self.ui.display_invalid_option_error(2)
                self.ui.pause()

    def toggle_wishlist(self, prop: Property) -> None:
        try:
            self.session.toggle_wishlist(prop)
        except StoreError:
            self.ui.display_save_failed()
            self.ui.pause()

    # --- Application form ---

    def application_form(self, prop: Property) -> None:
        """Collect applicant details for ``prop`` and submit them."""
        if not self.session.can_apply(prop):
            self.ui.display_application_failed()
            self.ui.pause()
            return

        tenant = self.session.require_tenant()
        self.ui.display_application_form_screen(prop)

        first_name = self.input_with_default(
            "First Name", tenant.personal.first_name, validate_name, INVALID_FIRST_NAME
        )
        last_name = self.input_with_default(
            "Last Name", tenant.personal.last_name, validate_name, INVALID_LAST_NAME
        )
        email = self.input_with_default("Email", tenant.email, validate_email, INVALID_EMAIL)
        phone_no = self.input_with_default(
            "Phone Number", tenant.personal.phone_no, validate_phone_number, INVALID_PHONE
        )

        while True:
            savings = self.ui.prompt("Savings (optional)")
            if not savings.strip() or validate_savings(savings):
                break
            self.ui.print_text(INVALID_SAVINGS)
        if self.ui.closed:
            return

        try:
            self.session.submit_application(first_name, last_name, email, phone_no, savings, prop)
        except ApplicationRejectedError:
            self.ui.display_application_failed()
        except StoreError:
            self.ui.display_save_failed()
        else:
            self.ui.display_application_submitted()
        self.ui.pause()

    def input_with_default(
        self,
        label: str,
        default: str,
        validator: Callable[[str], bool],
        error_message: str,
    ) -> str:
        """Prompt with ``default`` shown; blank keeps it, invalid re-prompts."""
        while True:
            value = self.ui.prompt(f"{label} [{default}]")
            if not value.strip():
                return default
            if validator(value):
                return value
            self.ui.print_text(error_message)
