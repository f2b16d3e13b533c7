from .booking import BookingRead, BookingStatusUpdate, ProviderAssignment, BookingListResponse
from .calendar import CalendarCell, CalendarMonth
from .provider import ProviderRead, ProviderCreate
from .customer import CustomerCreate, CustomerUpdate, CustomerRead
from .pricing_parameter import (
    PricingParameterBase,
    PricingParameterCreate,
    PricingParameterUpdate,
    PricingParameterRead,
    SortUpdate,
)
from .extra import ExtraCreate, ExtraUpdate, ExtraRead
from .frequency import FrequencyBase, FrequencyCreate, FrequencyUpdate, FrequencyRead
from .location import (
    LocationCreate,
    LocationUpdate,
    LocationRead,
    ServiceAreaRequest,
    ServiceAreaResponse,
)
from .industry import IndustryCreate, IndustryRead, ServiceCategoryCreate, ServiceCategoryRead
from .notification import AdminNotificationRead
