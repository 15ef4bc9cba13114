class InternalURIs:
    DUMP_STORE = "/dump"
