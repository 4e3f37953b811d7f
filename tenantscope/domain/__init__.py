"""Domain layer: enums, exceptions and value objects. No framework imports."""
