from .references import ReferenceCache
from .closure import ClosureBuilder
from .filter import ConfigurationPolicy, participates
from .resolver import OrderResolver, check_colocated
from .session import ResolutionSession, resolve_order, closure_of
