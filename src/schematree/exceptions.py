__all__ = ("SchemaTreeError", "ArenaClosed", "InvalidArgument", "InvalidSchema")


class SchemaTreeError(Exception):
    pass


class ArenaClosed(SchemaTreeError):
    """the arena was released and its nodes can no longer be used"""


class InvalidArgument(SchemaTreeError, ValueError):
    """a builder call a strict arena refuses to ignore"""


class InvalidSchema(SchemaTreeError):
    """a built schema that is not a valid json schema document"""

    def __init__(self, message, path=""):
        super().__init__(message)
        self.message = message
        self.path = path

    @classmethod
    def from_error(cls, error):
        """wrap a jsonschema error, locating it with a json pointer"""
        import jsonpointer

        path = jsonpointer.JsonPointer.from_parts(list(error.absolute_path)).path
        return cls(error.message, path or "/")

    def __str__(self):
        return f"❗{self.path}: {self.message}"
