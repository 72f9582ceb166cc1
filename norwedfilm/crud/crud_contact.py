from .base import CRUDBase
from norwedfilm.constants.statuses import ContactStatus
from norwedfilm.models.contact import Contact
from norwedfilm.schemas.contact import ContactCreate, ContactStatusUpdate


class CRUDContact(CRUDBase[Contact, ContactCreate, ContactStatusUpdate]):
    resource_name = "Contact"
    status_enum = ContactStatus


contact = CRUDContact(Contact)
