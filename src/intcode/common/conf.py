OPCODE_BASE = 100           # opcode = word % OPCODE_BASE
MODE_BASE = 10              # one decimal digit per parameter mode

PROGRAM_SEPARATOR = ','     # Textual program form: "1,0,0,0,99"
