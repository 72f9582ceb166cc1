# norwedfilm/crud/crud_dashboard.py
"""
Aggregated counts for the admin dashboard.
"""
from sqlalchemy import func
from sqlalchemy.orm import Session

from norwedfilm.constants.statuses import BookingStatus, ContactStatus, SubscriberStatus
from norwedfilm.models.booking import Booking
from norwedfilm.models.contact import Contact
from norwedfilm.models.media import Media
from norwedfilm.models.project import Project
from norwedfilm.models.review import Review
from norwedfilm.models.subscriber import Subscriber


class CRUDDashboard:
    def _count(self, db: Session, column, *criteria) -> int:
        return db.query(func.count(column)).filter(*criteria).scalar() or 0

    def get_stats(self, db: Session) -> dict:
        return {
            "projects": self._count(db, Project.id),
            "media": self._count(db, Media.id),
            "contacts": self._count(db, Contact.id),
            "new_contacts": self._count(
                db, Contact.id, Contact.status == ContactStatus.new.value
            ),
            "reviews": self._count(db, Review.id),
            "subscribers": self._count(db, Subscriber.id),
            "active_subscribers": self._count(
                db, Subscriber.id, Subscriber.status == SubscriberStatus.active.value
            ),
            "pending_bookings": self._count(
                db, Booking.id, Booking.status == BookingStatus.pending.value
            ),
        }


dashboard = CRUDDashboard()
