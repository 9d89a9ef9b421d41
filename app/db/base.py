# /app/db/base.py

# Central registry for all SQLAlchemy models. Importing them here guarantees the
# Base metadata knows every table before `Store.create_all()` runs.

from .base_class import Base

from .models.user_models import User
from .models.content_models import Content
from .models.chat_models import ChatMessage
from .models.reward_models import Reward
from .models.setting_models import Setting
