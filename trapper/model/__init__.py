from .sample import Sample, NS_MAX
from .batch import Batch
from .target import Target, DEFAULT_PORT

__all__ = ["Sample",
           "Batch",
           "Target",
           "NS_MAX",
           "DEFAULT_PORT"]
