"""Element types of the Google Data ``gd`` namespace."""

from gdatakit.gd.base import ContactDetail, GDElement
from gdatakit.gd.email_address import EmailAddress
from gdatakit.gd.im_address import IMAddress
from gdatakit.gd.organization import Organization
from gdatakit.gd.phone_number import PhoneNumber
from gdatakit.gd.postal_address import PostalAddress
from gdatakit.gd.reminder import Reminder
from gdatakit.gd.when import When
from gdatakit.gd.where import Where
from gdatakit.gd.who import Who

__all__ = [
    "ContactDetail",
    "EmailAddress",
    "GDElement",
    "IMAddress",
    "Organization",
    "PhoneNumber",
    "PostalAddress",
    "Reminder",
    "When",
    "Where",
    "Who",
]
