from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import (
    ConfigurationException as ConfigurationException,
)
from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    OptimisticLockException as OptimisticLockException,
)
from .exceptions import (
    PaymentRejectedException as PaymentRejectedException,
)
from .exceptions import (
    PaymentRejectionReason as PaymentRejectionReason,
)
from .exceptions import (
    PipelineInputException as PipelineInputException,
)
