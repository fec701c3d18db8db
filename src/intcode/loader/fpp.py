import logging as lg
from typing import Any, Dict, List, NamedTuple

from intcode.common.errors import AsmError
from intcode.common.ops import Op, Mode, WRITE_PARAM
import intcode.runtime.decoder as decoder


class Operand(NamedTuple):
    mode: Mode
    value: int | str    # literal or label name


class FPP:
    ''' First pass processor '''
    words: List[int | str]      # label names are resolved in the second pass
    label_dict: Dict[str, int]

    def __init__(self):
        self.words = list()
        self.label_dict = dict()

    @property
    def offset(self) -> int:
        return len(self.words)

    # Handlers
    def on_label(self, labelname: str):
        if labelname in self.label_dict:
            raise AsmError(f'Duplicate label {labelname}')

        self.label_dict[labelname] = self.offset
        lg.debug(f'Label {labelname} @ {self.offset}')

    def issue_instruction(self, args: Any):
        op, operands = args
        op = Op(op)

        write_param = WRITE_PARAM.get(op)

        if write_param is not None and operands[write_param].mode == Mode.IMMEDIATE:
            raise AsmError(f'Immediate operand used as destination of {op.name.lower()} @ {self.offset}')

        word = decoder.encode(op, [o.mode for o in operands])
        lg.debug(f'Issuing {op.name} as {word} @ {self.offset}')

        self.words.append(word)
        self.words.extend(o.value for o in operands)

    def issue_data(self, values: List[int | str]):
        lg.debug(f'Issuing {len(values)} data words @ {self.offset}')
        self.words.extend(values)

    def resolve(self) -> list[int]:
        resolved = []

        for word in self.words:
            if isinstance(word, str):
                if word not in self.label_dict:
                    raise AsmError(f'Unknown label {word}')

                word = self.label_dict[word]

            resolved.append(word)

        return resolved
