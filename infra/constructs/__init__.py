from .api import Api as Api
from .functions import Functions as Functions
