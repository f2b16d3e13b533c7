from .base import BaseModel
from .business import Business, BusinessStoreOptions, Industry, ServiceCategory
from .booking import Booking
from .booking_status import BookingStatus
from .service_provider import ServiceProvider
from .customer import Customer
from .pricing_parameter import PricingParameter
from .extra import Extra
from .industry_frequency import IndustryFrequency
from .location import Location
from .admin_notification import AdminNotification

__all__ = [
    "BaseModel",
    "Business",
    "BusinessStoreOptions",
    "Industry",
    "ServiceCategory",
    "Booking",
    "BookingStatus",
    "ServiceProvider",
    "Customer",
    "PricingParameter",
    "Extra",
    "IndustryFrequency",
    "Location",
    "AdminNotification",
]
