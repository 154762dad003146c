"""
E4B container constants.

File layout (big-endian chunk headers):
    FORM <len> 'E4B0'
      TOC1 <len>
        32-byte entry per data chunk:
          tag(4) size(4) offset(4) index(2) name(16) pad(2)
      E4P1 <len> preset record          (per preset)
      E3S1 <len> sample record          (per sample)
      E4s1 <len> sequence record        (per sequence)
      EMSt <len> startup record
"""

TAG_LENGTH = 4
CHUNK_HEADER_SIZE = 8

FORM_TAG = "FORM"
BANK_FORMAT_TAG = "E4B0"
TOC_TAG = "TOC1"
PRESET_TAG = "E4P1"
SAMPLE_TAG = "E3S1"
SEQUENCE_TAG = "E4s1"
STARTUP_TAG = "EMSt"
MULTISETUP_TAG = "EMS0"
E4MA_TAG = "E4Ma"

# Recognized, length-skipped, never decoded
SKIPPED_TAGS = (E4MA_TAG, MULTISETUP_TAG)

TOC_ENTRY_SIZE = 32

# TOC entries declare the target payload size minus this amount
TOC_SIZE_ADJUSTMENT = 2

NAME_LENGTH = 16

PRESET_HEADER_SIZE = 84
PRESET_DATA_SIZE = 82
PRESET_MAGIC = b"R#\x00~"

VOICE_BASE_SIZE = 284
ZONE_SIZE = 22
VOICE_SIZE_REMAINDER = VOICE_BASE_SIZE % ZONE_SIZE  # 20
ENVELOPE_SIZE = 12
LFO_SIZE = 7
CORD_SIZE = 4

SAMPLE_HEADER_SIZE = 94
SEQUENCE_HEADER_SIZE = 18

MIDI_CHANNEL_SIZE = 32
STARTUP_SIZE = 1366
DEFAULT_STARTUP_NAME = "Untitled MSetup "
