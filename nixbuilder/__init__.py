from .app_source import AppSource
from .builder import AppBuilder, BuildPlan, BuildResult
from .detection import Selection, detect_builder
from .generator import gen_dockerfile, gen_nix
