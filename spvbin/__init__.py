"""spvbin – embed SPIR-V shader modules into generated source code.

High-level API:
    spvbin.generate(paths, opts)  — write one source file embedding all modules
    spvbin.read_module(path)      — decode a .spv file into 32-bit words
    spvbin.collect_inputs(paths)  — expand directories into sorted .spv paths
"""

__version__ = "0.2.0"

from .errors import (  # noqa: E402
    SpvbinError, ConfigError, NotFoundError, InvalidInputError,
    NoInputError, IdentifierCollisionError, FileIOError,
)
from .decode import (  # noqa: E402
    SPIRV_MAGIC, ByteOrder, DecodedModule, TruncatedModuleWarning,
    detect_byte_order, decode_words, read_module,
)
from .naming import (  # noqa: E402
    InputFile, SymbolNames, identifier_for, build_naming_table, symbol_names,
)
from .collect import collect_inputs  # noqa: E402
from .emit import Emitter, GoEmitter, PythonEmitter, get_emitter  # noqa: E402
from .generate import GeneratorOptions, GenerationResult, generate  # noqa: E402
