"""Import every model module so ``Base.metadata`` knows all tables."""
from .base import Base  # noqa: F401
from .authz import User, TokenBlocklist  # noqa: F401
from .audit import AuditLog  # noqa: F401
from .employee import Employee  # noqa: F401
from .product import Product  # noqa: F401
from .supply import Supply  # noqa: F401
from .machine import Machine  # noqa: F401
from .production_speed import ProductionSpeed  # noqa: F401
from .loss import Loss  # noqa: F401
from .production_error import ProductionError  # noqa: F401
from .maintenance import Maintenance  # noqa: F401
from .absenteeism import Absenteeism  # noqa: F401
from .production_observation import ProductionObservation  # noqa: F401
