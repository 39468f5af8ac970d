"""
Behaviour mixins assembled into `NDArrayBase`.

Each mixin covers one concern and is written only against the capabilities
declared by `NDArrayBase` (shape, root owner, index resolution, labels), so
the dense array and every view kind share a single implementation:

- ``NDArrayAccessMixin``     element access, iteration, fill/apply/map
- ``NDArrayArithmeticMixin`` elementwise arithmetic and operators
- ``NDArrayReductionMixin``  sum, norm and elementwise maps
- ``NDArrayViewsMixin``      slice, permute, reshape and mask views
- ``NDArrayBartDimsMixin``   dimension labels
- ``NDArrayMemoryMixin``     copies and NumPy interop
"""

from ._access import NDArrayAccessMixin
from ._arithmetic import NDArrayArithmeticMixin
from ._bart_dims import NDArrayBartDimsMixin, normalize_bart_dims
from ._memory import NDArrayMemoryMixin
from ._reduction import NDArrayReductionMixin
from ._views import NDArrayViewsMixin

__all__ = [
    NDArrayAccessMixin.__name__,
    NDArrayArithmeticMixin.__name__,
    NDArrayBartDimsMixin.__name__,
    NDArrayMemoryMixin.__name__,
    NDArrayReductionMixin.__name__,
    NDArrayViewsMixin.__name__,
    normalize_bart_dims.__name__,
]
