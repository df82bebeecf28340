from typing import Dict, Type, Callable, Any


class EntityMapper:
    """Dispatches a domain model to the mapper registered for its type."""

    def __init__(self, entity_mappings: Dict[Type, Callable[[Any], Any]]):
        self.entity_mappings = entity_mappings

    def map_to_entity(self, model_instance: Any):
        model_type = type(model_instance)
        mapping = self.entity_mappings.get(model_type)
        if mapping is None:
            raise ValueError(f"No entity mapping found for model type: {model_type.__name__}")
        return mapping(model_instance)
