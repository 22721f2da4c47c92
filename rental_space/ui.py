"""Fixed-width terminal screens for rental-space.

:class:`ConsoleUI` only renders records and reads lines; it never mutates
state. Output goes to ``output`` (stdout by default) and input comes from
``input_func`` so both can be replaced in tests.
"""

import sys
from typing import Callable, Sequence, TextIO

from rental_space.models import DATE_FORMAT, TIMESTAMP_FORMAT, Property, Tenant
from rental_space.rent import fortnightly_rent, monthly_rent
from rental_space.store.rental import RentalDataStore

APP_NAME = "Monash Rental Space"
MAX_WIDTH = 48
CELL_WIDTH = 15
OPTION_WIDTH = 22

SUPPORT_EMAIL = "support@mproperty.com.au"
LANDLORD_EMAIL = "landlord@mproperty.com.au"
RTBA_URL = "https://rentalbonds.vic.gov.au/Bond/Lodgment/Begin"

NO_PROPERTIES_MESSAGE = "There are currently no properties available."
PRESS_ENTER = "\n<- Press enter to return."
LEAVE_BLANK = "\n<- Leave blank to return."

BROWSE_OPTIONS = (("Add to Wishlist", "Save a property"), ("Apply", "Apply to rent a property"))
WISHLIST_OPTIONS = (("Remove from Wishlist", "Remove a property"), ("Apply", "Apply to rent a property"))


def centre(text: str, width: int = CELL_WIDTH) -> str:
    """Centre ``text`` in ``width`` columns, odd padding going left."""
    pad = max(width - len(text), 0)
    right = pad // 2
    return " " * (pad - right) + text + " " * right


def format_money(amount: float, decimals: int = 2) -> str:
    return f"A${amount:,.{decimals}f}"


class ConsoleUI:
    """Line-based text screens, 48 columns wide."""

    def __init__(
        self,
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._input = input_func or input
        self.output = output or sys.stdout
        self.title = ""
        self.closed = False

    # --- Low-level output ---

    def _println(self, text: str = "") -> None:
        print(text, file=self.output)

    def prompt(self, label: str | None = None) -> str:
        """Print ``label: `` and read one line; EOF reads as blank."""
        self.output.write(f"{label or 'Input'}: ")
        self.output.flush()
        try:
            return self._input()
        except EOFError:
            self.closed = True
            return ""

    def pause(self) -> None:
        """Wait for the user to press enter."""
        self.prompt()

    def print_text(self, text: str) -> None:
        """Print ``text`` wrapped at MAX_WIDTH, hyphenating split words."""
        line: list[str] = []
        for i, c in enumerate(text):
            if c == "\n":
                self._println("".join(line))
                line = []
                continue
            line.append(c)
            if len(line) == MAX_WIDTH:
                split_word = c != " " and i + 1 < len(text) and text[i + 1] != " "
                self._println("".join(line) + ("-" if split_word else ""))
                line = []
        if line:
            self._println("".join(line))

    def print_leave_blank_to_return(self) -> None:
        self.print_text(LEAVE_BLANK)

    def print_menu_options(self, options: Sequence[str]) -> None:
        for i, option in enumerate(options, start=1):
            self.print_text(f"[{i}]   {option}")
        self._println()

    def print_sub_menu_options(
        self,
        options: Sequence[str],
        descriptions: Sequence[str],
        lettered: bool,
    ) -> None:
        for i, (option, description) in enumerate(zip(options, descriptions)):
            key = chr(ord("a") + i) if lettered else str(i + 1)
            info = f"[{key}] {option}"
            padding = max(OPTION_WIDTH - len(info), 1)
            self.print_text(info + " " * padding + description)
        self._println()

    def display_header(self, subtitle: str | None = None) -> None:
        rule = "-" * MAX_WIDTH
        name_pad = MAX_WIDTH - len(APP_NAME) - 2
        self._println()
        self._println(rule)
        self._println("|" + " " * (name_pad // 2) + APP_NAME + " " * (name_pad // 2 + 1) + "|")
        self._println(rule)
        self._println()
        self._println(self._pad_centre(f"*** {self.title} ***"))
        if subtitle is not None:
            self._println(self._pad_centre(subtitle))
        self._println()

    @staticmethod
    def _pad_centre(text: str) -> str:
        total = MAX_WIDTH - len(text)
        left = max(total // 2, 0)
        right = max(total // 2 + total % 2, 0)
        return " " * left + text + " " * right

    def display_message(self, message: str) -> None:
        self.display_header()
        self.print_text(message)
        self.print_text(PRESS_ENTER)

    # --- Screens ---

    def display_home_screen(self, options: Sequence[str], tenant: Tenant | None = None) -> None:
        if tenant is not None:
            self.title = f"Hi, {tenant.personal.full_name}!"
            message = "How can we assist you today?"
        else:
            self.title = "Welcome to MRS!"
            message = "You must be logged in to use the system"
        self.display_header()
        self.print_text(message + "\n\n")
        self.print_text("Please enter the number of your choice.\n\n")
        self.print_menu_options(options)

    def display_login_screen(self) -> None:
        self.title = "Login"
        self.display_header()
        self.print_text("Please enter your login information below:\n")

    def display_login_failed(self) -> None:
        self.title = "Login failed"
        self.display_message(
            "\nYour email address and password are not match.\n\n"
            "Please check your credentials and try again."
        )

    def display_contact_screen(self) -> None:
        self.title = "Contact Us"
        self.display_header()
        self.print_text(
            "For any inquiries or issues with your property application, "
            "please send an email to:"
        )
        self.print_text(SUPPORT_EMAIL)
        self.print_text(PRESS_ENTER)

    def display_invalid_option_error(self, options_length: int) -> None:
        self.title = "Invalid Option"
        self.display_message(
            "Your option entered is invalid.\n"
            f"Please enter a number between 1 - {options_length}."
        )

    def display_invalid_number_error(self) -> None:
        self.title = "Invalid Number"
        self.display_message("Your option entered is invalid.\nPlease enter a correct number")

    def display_invalid_letter_error(self) -> None:
        self.title = "Invalid Letter"
        self.display_message("Your option entered is invalid.\nPlease enter a correct letter")

    def display_no_properties(self) -> None:
        self.title = "No Properties"
        self.display_message(NO_PROPERTIES_MESSAGE)

    def display_save_failed(self) -> None:
        self.title = "Save failed"
        self.display_message(
            "Your change could not be saved.\n\nPlease contact support at " + SUPPORT_EMAIL + "."
        )

    def display_application_form_screen(self, prop: Property) -> None:
        self.title = "Application Form"
        self.display_header(f"for {prop.address}")
        self.print_text("Please enter the following information:")

    def display_application_submitted(self) -> None:
        self.title = "Application submitted"
        self.display_message(
            "Your rental application has been successfully submitted!\n\n"
            f"Kindly email your proof of income/funds to {LANDLORD_EMAIL}.\n\n"
            f"Please check out for important information from RTBA at {RTBA_URL}."
        )

    def display_application_failed(self) -> None:
        self.title = "Application failed"
        self.display_message(
            "You have rejected application for this property.\n\n"
            "Re-applying is not possible at this moment."
        )

    def display_property_search_screen(
        self,
        properties: Sequence[Property],
        store: RentalDataStore,
        tenant: Tenant,
    ) -> None:
        self.title = "Properties"
        self.display_header()
        self.display_property_list(properties, store, tenant, BROWSE_OPTIONS)

    def display_wishlist_screen(
        self,
        properties: Sequence[Property],
        store: RentalDataStore,
        tenant: Tenant,
    ) -> None:
        self.title = "Wishlist"
        self.display_header()
        self.display_property_list(properties, store, tenant, WISHLIST_OPTIONS)

    def display_property_list(
        self,
        properties: Sequence[Property],
        store: RentalDataStore,
        tenant: Tenant,
        menu: Sequence[tuple[str, str]],
    ) -> None:
        """List properties with wishlist stars; menu only when non-empty."""
        if not properties:
            self.print_text(NO_PROPERTIES_MESSAGE + "\n")
        else:
            for i, prop in enumerate(properties, start=1):
                entry = store.find_wishlist_entry(prop.property_id, tenant.email)
                star = "★" if entry is not None else "☆"
                furnished = "Furnished" if prop.is_furnished else "Not Furnished"
                status = "Off market" if prop.is_off_market else "Leasing"

                self.print_text(f"[{i}] {prop.address} {star}")
                self._println(
                    f"{prop.suburb:<{CELL_WIDTH}}|{centre(prop.property_type.label)}|"
                    f"{furnished:>{CELL_WIDTH}}"
                )
                self._println(
                    f"{status:<{CELL_WIDTH}}|{centre(format_money(prop.price, 0))}|"
                    f"{prop.date_added.strftime(DATE_FORMAT):>{CELL_WIDTH}}"
                )
                if entry is not None:
                    self.print_text(f"Wishlisted on {entry.date_added.strftime(TIMESTAMP_FORMAT)}")
                self._println()

            self.print_text("Please enter the letter of your choice.\n")
            self.print_sub_menu_options(
                [option for option, _ in menu],
                [description for _, description in menu],
                lettered=True,
            )
        self.print_leave_blank_to_return()

    def display_property_details_screen(self, prop: Property, wishlisted: bool) -> None:
        self.title = prop.address
        self.display_header()
        self.print_text(f"Address: {prop.full_address}")
        self.print_text(f"Type: {prop.property_type.label}")
        self.print_text(f"Status: {'Off market' if prop.is_off_market else 'Leasing'}")
        self.print_text(f"Furnished: {'Furnished' if prop.is_furnished else 'Not Furnished'}")
        self.print_text(f"Price: {format_money(prop.price)} per week")
        self._println(f"{'':7}{format_money(fortnightly_rent(prop.price))} per fortnight")
        self._println(f"{'':7}{format_money(monthly_rent(prop.price))} per month")
        self.print_text(f"Inspection: {prop.inspection_time.strftime(TIMESTAMP_FORMAT)}\n")
        self.print_text(f"Application URL: {prop.app_form_url}")
        self.print_text(f"Description: {prop.description}")

        self.print_text("\nPlease enter the letter of your choice.")
        self._println()
        self.print_sub_menu_options(
            ["Remove" if wishlisted else "Add", "Apply"],
            ["Remove from Wishlist" if wishlisted else "Add to Wishlist", "Apply to rent a property"],
            lettered=False,
        )
        self.print_leave_blank_to_return()
