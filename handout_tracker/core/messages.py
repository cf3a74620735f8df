# handout_tracker/core/messages.py

SUCCESS_MSG = "success"
ERROR_MSG = "something went wrong"

INVALID_ID_MSG = "Invalid ID"
INVALID_BODY_MSG = "Invalid request body"

# customers / referrals
CUSTOMER_CREATED_MSG = "Customer created successfully"
CUSTOMER_UPDATED_MSG = "Customer updated successfully"
CUSTOMER_DELETED_MSG = "Customer deleted successfully"
CUSTOMER_NOT_FOUND_MSG = "Customer not found"
CUSTOMER_HANDOUT_LINK_ERROR_MSG = "Cannot delete, customer has handouts that are linked!!"
CUSTOMER_REFERRAL_LINK_ERROR_MSG = "Cannot delete, customer is the referrer of other customers!!"
NAME_REQUIRED_MSG = "Name is required"
INVALID_MOBILE_MSG = "Enter a valid mobile number"

REFERRAL_LINKED_SUCCESS_MSG = "Customer referral linked successfully"
REFERRAL_UNLINKED_SUCCESS_MSG = "Customer referral removed successfully"
REFERRER_NOT_FOUND_MSG = "Referred customer not found"
DANGLING_REFERRER_MSG = "Referrer not found"
NO_REFERRER_MSG = "Customer has no referrer"
SAME_CUSTOMER_LINK_MSG = "Cannot link same customer to each other"

# handouts
HANDOUT_CREATED_MSG = "Handout created successfully"
HANDOUT_UPDATED_MSG = "Handout updated successfully"
HANDOUT_DELETED_MSG = "Handout deleted successfully"
HANDOUT_NOT_FOUND_MSG = "Handout not found"
HANDOUT_COLLECTION_LINK_ERROR_MSG = "Cannot delete, handouts have collections that are linked!!"
CUSTOMER_REQUIRED_MSG = "customer cannot be empty"

# collections
COLLECTION_CREATED_MSG = "Collection created successfully"
COLLECTION_UPDATED_MSG = "Collection updated successfully"
COLLECTION_DELETED_MSG = "Collection deleted successfully"
COLLECTION_NOT_FOUND_MSG = "Collection not found"
HANDOUT_REQUIRED_MSG = "handout id cannot be empty"

DATE_REQUIRED_MSG = "date cannot be empty"
INVALID_AMOUNT_MSG = "enter a valid amount"

# auth / admins
AUTH_HEADER_REQUIRED_MSG = "Authorization header required"
AUTH_FORMAT_MSG = "Invalid authorization format. Use 'Bearer <token>'"
INVALID_TOKEN_MSG = "Invalid or expired token"
ADMIN_INACTIVE_MSG = "Admin account is not active"
INVALID_CREDENTIALS_MSG = "Invalid credentials"
CREDENTIALS_REQUIRED_MSG = "Username and password are required"
LOGIN_SUCCESS_MSG = "Login successful"
PASSWORD_TOO_SHORT_MSG = "Password must be at least 6 characters long"
PASSWORD_TOO_LONG_MSG = "Password must be at most 72 bytes long"
INVALID_ROLE_MSG = "Invalid role. Must be 'admin', 'manager', or 'viewer'"
USERNAME_TAKEN_MSG = "Username already exists"
ADMIN_REGISTERED_MSG = "Admin registered successfully"
ADMIN_RETRIEVED_MSG = "Admin retrieved successfully"
ADMINS_RETRIEVED_MSG = "Admins retrieved successfully"
ADMIN_NOT_FOUND_MSG = "Admin not found"
ADMIN_UPDATED_MSG = "User updated successfully"
ADMIN_DELETED_MSG = "User deleted successfully"
NO_FIELDS_TO_UPDATE_MSG = "No fields to update"
SUPER_ADMIN_MODIFY_MSG = "Cannot modify role or active status of super admin"
SUPER_ADMIN_DELETE_MSG = "Cannot delete the super admin account"
SELF_DELETE_MSG = "Cannot delete your own account"
ONLY_ADMINS_REGISTER_MSG = "Only admins can register new admin users"
ONLY_ADMINS_VIEW_MSG = "Only admins can view all users"
ONLY_ADMINS_UPDATE_MSG = "Only admins can update users"
ONLY_ADMINS_DELETE_MSG = "Only admins can delete users"
USERNAME_EMPTY_MSG = "Username cannot be empty"
SUPER_ADMIN_RENAME_MSG = "Cannot rename the super admin account"
