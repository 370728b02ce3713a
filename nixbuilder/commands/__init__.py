from .build import build
from .clean import clean
from .detect import detect
from .list_builders import list_builders
from .log import log
from .plan import plan
from .version import version
