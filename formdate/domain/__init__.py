"""Domain layer: schemas, validators and the validation context."""
