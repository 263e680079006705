from lispette.reader.parser import InPort, read, read_all, atom

__all__ = ["InPort", "read", "read_all", "atom"]
