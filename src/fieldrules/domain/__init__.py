"""Domain layer: rule entities and the services that evaluate them."""
