from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    ConfigurationException as ConfigurationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    PaymentRejectedException as PaymentRejectedException,
)
from .exception import (
    PaymentRejectionReason as PaymentRejectionReason,
)
from .exception import (
    PipelineInputException as PipelineInputException,
)
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    IsoDateTime as IsoDateTime,
)
from .value_object import (
    Money as Money,
)
