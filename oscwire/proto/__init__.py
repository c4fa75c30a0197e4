"""OSC packet model and wire encoding."""

from .packet import Bundle as Bundle
from .packet import Message as Message
from .packet import Packet as Packet
from .serialization import ByteEmitter as ByteEmitter
from .serialization import SerializationError as SerializationError
from .serialization import UnsupportedArgumentType as UnsupportedArgumentType
from .types import Int64 as Int64
from .types import OscArgument as OscArgument
