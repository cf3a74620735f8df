from handout_tracker.schemas.common import DataResp, MessageResp
from handout_tracker.schemas.customer_schemas import (
    CustomerCreate,
    CustomerUpdate,
    CustomerOut,
    ReferralLink,
)
from handout_tracker.schemas.handout_schemas import (
    HandoutCreate,
    HandoutUpdate,
    HandoutOut,
    HandoutDetailOut,
    HandoutWithCustomerOut,
)
from handout_tracker.schemas.collection_schemas import (
    CollectionCreate,
    CollectionUpdate,
    CollectionOut,
)
from handout_tracker.schemas.admin_schemas import (
    LoginRequest,
    LoginResponse,
    RegisterAdminRequest,
    AdminUpdate,
    AdminInfo,
    AdminOut,
)
