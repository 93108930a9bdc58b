def resolve_flag(option, config_value) -> bool:
    """
    A "true"/"false" CLI option wins when given; otherwise the config.json value applies.
    """
    if option is None:
        return bool(config_value)
    return str(option).strip().lower() == "true"
