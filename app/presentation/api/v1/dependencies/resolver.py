from app.application.use_cases.resolve_image import ResolveImageUseCase
from app.infrastructure.adapters.bundles.resolver import get_resolver_adapter_bundle


def get_resolve_image_use_case() -> ResolveImageUseCase:
    """Compose the ResolveImageUseCase at Presentation layer using adapter providers."""
    adapters = get_resolver_adapter_bundle()
    return ResolveImageUseCase(adapters)
