# Automatically load all models so metadata knows them
from handout_tracker.models.admin_model import Admin
from handout_tracker.models.customer_model import Customer
from handout_tracker.models.handout_model import Handout
from handout_tracker.models.collection_model import Collection
