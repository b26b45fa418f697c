from app.generation.base import BaseGenerator
from app.generation.factory import GeneratorFactory
from app.generation.models import BackendConfig, ProviderConfig
from app.generation.site_generator import SiteGenerator

__all__ = ["BackendConfig", "BaseGenerator", "GeneratorFactory", "ProviderConfig", "SiteGenerator"]
