from .users import User, UserManager
from .profiles import SellerProfile, SellerFollow
from .products import Product
from .orders import Order
from .notifications import Notification
