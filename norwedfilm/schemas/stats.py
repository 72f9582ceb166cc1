from norwedfilm.schemas.base import CamelModel


class DashboardStats(CamelModel):
    projects: int
    media: int
    contacts: int
    new_contacts: int
    reviews: int
    subscribers: int
    active_subscribers: int
    pending_bookings: int
