from . import crud_booking
from . import crud_business
from . import crud_customer
from . import crud_extra
from . import crud_frequency
from . import crud_industry
from . import crud_location
from . import crud_notification
from . import crud_pricing_parameter
from . import crud_service_provider
