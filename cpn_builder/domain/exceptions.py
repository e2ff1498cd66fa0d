class CpnBuilderError(Exception):
    pass


class DefinitionError(CpnBuilderError):
    """Raised when a construction call describes a net the tool cannot load."""
