from .exceptions import (  # noqa: F401
    FieldError,
    FieldTypeMismatch,
    NonResidueError,
    ShapeError,
)
from .field_elements import (  # noqa: F401
    FQ,
    FQP,
    extension_field,
    prime_field,
)
from .field_properties import (  # noqa: F401
    build_fields,
    validate_field_properties,
)
from .modular import (  # noqa: F401
    legendre,
    mod_exp,
    mod_inverse,
    mod_sqrt,
)
from .poly_utils import (  # noqa: F401
    deg,
    poly_rounded_div,
    zeros,
)
