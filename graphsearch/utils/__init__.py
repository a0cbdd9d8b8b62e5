from .interner import Interner
