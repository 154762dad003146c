"""
Byte-valued enumerations used by E4 voices.

Every enum here is stored as a single byte on disk. Banks created by
later OS revisions can carry values this table does not list; those are
kept as ``UNKNOWN_<n>`` pseudo-members so a read/write cycle does not
lose them.
"""

from enum import IntEnum


class ByteEnum(IntEnum):
    """IntEnum that tolerates unlisted byte values."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= 0xFF:
            member = int.__new__(cls, value)
            member._name_ = f"UNKNOWN_{value}"
            member._value_ = value
            return member
        return None

    @property
    def label(self) -> str:
        """Human readable name."""
        return self.name.replace("_", " ").title()


class LFOShape(ByteEnum):
    TRIANGLE = 0
    SINE = 1
    SAWTOOTH = 2
    SQUARE = 3
    PULSE_33 = 4
    PULSE_25 = 5
    PULSE_16 = 6
    PULSE_12 = 7
    OCTAVES = 8
    FIFTH_PLUS_OCTAVE = 9
    SUS4_TRIP = 10
    NEENER = 11
    SINE_1_2 = 12
    SINE_1_3_5 = 13
    SINE_NOISE = 14
    HEMI_QUAVER = 15
    RANDOM = 255


class CordSource(ByteEnum):
    """Modulation sources a cord can read from."""

    OFF = 0
    XFADE_RANDOM = 4
    KEY_POLARITY_POS = 8
    KEY_POLARITY_CENTER = 9
    VEL_POLARITY_POS = 10
    VEL_POLARITY_CENTER = 11
    VEL_POLARITY_LESS = 12
    RELEASE_VEL = 13
    GATE = 14
    PITCH_WHEEL = 16
    MOD_WHEEL = 17
    PRESSURE = 18
    PEDAL = 19
    MIDI_A = 20
    MIDI_B = 21
    FOOTSWITCH_1 = 22
    FOOTSWITCH_2 = 23
    FOOTSWITCH_1_FF = 24
    FOOTSWITCH_2_FF = 25
    MIDI_VOLUME = 26
    MIDI_PAN = 27
    EXPRESSION = 28
    MIDI_C = 32
    MIDI_D = 33
    MIDI_E = 34
    MIDI_F = 35
    MIDI_G = 36
    MIDI_H = 37
    T_SWITCH = 38
    T_SWITCH_FF = 39
    MIDI_I = 40
    MIDI_J = 41
    MIDI_K = 42
    MIDI_L = 43
    MIDI_M = 44
    MIDI_N = 45
    MIDI_O = 46
    MIDI_P = 47
    KEY_GLIDE = 48
    KEY_CC_WIN = 49
    AMP_ENV_POLARITY_POS = 72
    AMP_ENV_POLARITY_CENTER = 73
    AMP_ENV_POLARITY_LESS = 74
    FILTER_ENV_POLARITY_POS = 80
    FILTER_ENV_POLARITY_CENTER = 81
    FILTER_ENV_POLARITY_LESS = 82
    AUX_ENV_POLARITY_POS = 88
    AUX_ENV_POLARITY_CENTER = 89
    AUX_ENV_POLARITY_LESS = 90
    LFO1_POLARITY_CENTER = 96
    LFO1_POLARITY_POS = 97
    WHITE_NOISE = 98
    PINK_NOISE = 99
    KEY_RANDOM_1 = 100
    KEY_RANDOM_2 = 101
    LFO2_POLARITY_CENTER = 104
    LFO2_POLARITY_POS = 105
    LAG_1_IN = 106
    LAG_1 = 107
    LAG_2_IN = 108
    LAG_2 = 109
    CHANNEL_LAG_1 = 128
    CHANNEL_RAMP = 129
    CHANNEL_LAG_2 = 130
    POLY_KEY_TIMER = 131
    CLK_2X_WHOLE_NOTE = 144
    CLK_WHOLE_NOTE = 145
    CLK_HALF_NOTE = 146
    CLK_QUARTER_NOTE = 147
    CLK_8TH_NOTE = 148
    CLK_16TH_NOTE = 149
    CLK_4X_WHOLE_NOTE = 150
    CLK_8X_WHOLE_NOTE = 151
    DC_OFFSET = 160
    SUMMING_AMP = 161
    SWITCH = 162
    ABSOLUTE_VALUE = 163
    DIODE = 164
    FLIP_FLOP = 165
    QUANTIZER = 166
    GAIN_4X = 167
    FUNC_GEN_1_POS = 208
    FUNC_GEN_1_CENTER = 209
    FUNC_GEN_1_LESS = 210
    FUNC_GEN_1_TRIGGER = 211
    FUNC_GEN_1_GATE = 212
    FUNC_GEN_2_POS = 213
    FUNC_GEN_2_CENTER = 214
    FUNC_GEN_2_LESS = 215
    FUNC_GEN_2_TRIGGER = 216
    FUNC_GEN_2_GATE = 217
    FUNC_GEN_3_POS = 218
    FUNC_GEN_3_CENTER = 219
    FUNC_GEN_3_LESS = 220
    FUNC_GEN_3_TRIGGER = 221
    FUNC_GEN_3_GATE = 222


class CordDestination(ByteEnum):
    """Parameters a cord can modulate."""

    OFF = 0
    KEY_SUSTAIN = 8
    LOOP_SELECT_CONT = 16
    LOOP_SELECT_JUMP = 17
    FINE_PITCH = 47
    PITCH = 48
    GLIDE_RATE = 49
    CHORUS_AMT = 50
    CHORUS_INITIAL = 51
    SAMPLE_START = 52
    SAMPLE_LOOP = 53
    SAMPLE_RETRIGGER_NEG = 54
    OSC_SPEED = 55
    FILTER_FREQ = 56
    FILTER_RES = 57
    REALTIME_RES = 58
    SAMPLE_RETRIGGER_POS = 59
    AMP_VOLUME = 64
    AMP_PAN = 65
    AMP_CROSSFADE = 66
    SEND_MAIN = 68
    SEND_AUX_1 = 69
    SEND_AUX_2 = 70
    SEND_AUX_3 = 71
    AMP_ENV_RATES = 72
    AMP_ENV_ATTACK = 73
    AMP_ENV_DECAY = 74
    AMP_ENV_RELEASE = 75
    AMP_ENV_SUSTAIN = 76
    FILTER_ENV_RATES = 80
    FILTER_ENV_ATTACK = 81
    FILTER_ENV_DECAY = 82
    FILTER_ENV_RELEASE = 83
    FILTER_ENV_SUSTAIN = 84
    FILTER_ENV_TRIGGER = 86
    AUX_ENV_RATES = 88
    AUX_ENV_ATTACK = 89
    AUX_ENV_DECAY = 90
    AUX_ENV_RELEASE = 91
    AUX_ENV_SUSTAIN = 92
    AUX_ENV_TRIGGER = 94
    LFO_1_FREQ = 96
    LFO_1_TRIG = 97
    LFO_2_FREQ = 104
    LFO_2_TRIG = 105
    LAG_1_IN = 106
    LAG_2_IN = 108
    LAG_1_RATE = 109
    LAG_2_RATE = 110
    FUNC_GEN_1_RATE = 112
    FUNC_GEN_1_RETRIGGER = 113
    FUNC_GEN_1_LENGTH = 114
    FUNC_GEN_1_DIRECTION = 115
    FUNC_GEN_2_RATE = 117
    FUNC_GEN_2_RETRIGGER = 118
    FUNC_GEN_2_LENGTH = 119
    FUNC_GEN_2_DIRECTION = 120
    FUNC_GEN_3_RATE = 122
    FUNC_GEN_3_RETRIGGER = 123
    FUNC_GEN_3_LENGTH = 124
    FUNC_GEN_3_DIRECTION = 125
    KEY_TIMER_RATE = 132
    WET_DRY_MIX = 144
    SUMMING_AMP = 161
    SWITCH = 162
    ABSOLUTE_VALUE = 163
    DIODE = 164
    QUANTIZER = 165
    FLIP_FLOP = 166
    GAIN_4X = 167
    CORD_1_AMT = 168
    CORD_2_AMT = 169
    CORD_3_AMT = 170
    CORD_4_AMT = 171
    CORD_5_AMT = 172
    CORD_6_AMT = 173
    CORD_7_AMT = 174
    CORD_8_AMT = 175
    CORD_9_AMT = 176
    CORD_10_AMT = 177
    CORD_11_AMT = 178
    CORD_12_AMT = 179
    CORD_13_AMT = 180
    CORD_14_AMT = 181
    CORD_15_AMT = 182
    CORD_16_AMT = 183
    CORD_17_AMT = 184
    CORD_18_AMT = 185
    CORD_19_AMT = 186
    CORD_20_AMT = 187
    CORD_21_AMT = 188
    CORD_22_AMT = 189
    CORD_23_AMT = 190
    CORD_24_AMT = 191
    CORD_25_AMT = 192
    CORD_26_AMT = 193
    CORD_27_AMT = 194
    CORD_28_AMT = 195
    CORD_29_AMT = 196
    CORD_30_AMT = 197
    CORD_31_AMT = 198
    CORD_32_AMT = 199
    CORD_33_AMT = 200
    CORD_34_AMT = 201
    CORD_35_AMT = 202
    CORD_36_AMT = 203


class FilterType(ByteEnum):
    FOUR_POLE_LOWPASS = 0
    TWO_POLE_LOWPASS = 1
    SIX_POLE_LOWPASS = 2
    TWO_POLE_HIGHPASS = 8
    FOUR_POLE_HIGHPASS = 9
    CONTRARY_BANDPASS = 18
    SWEPT_EQ_1_OCTAVE = 32
    SWEPT_EQ_2_1_OCTAVE = 33
    SWEPT_EQ_3_1_OCTAVE = 34
    PHASER_1 = 64
    PHASER_2 = 65
    BAT_PHASER = 66
    FLANGER_LITE = 72
    VOCAL_AH_AY_EE = 80
    VOCAL_OO_AH = 81
    DUAL_EQ_MORPH = 96
    DUAL_EQ_LP_MORPH = 97
    DUAL_EQ_MORPH_EXPRESSION = 98
    PEAK_SHELF_MORPH = 104
    MORPH_DESIGNER = 108
    NO_FILTER = 127
    ACE_OF_BASS = 131
    MEGASWEEPZ = 132
    EARLY_RIZER = 133
    MILLENNIUM = 134
    MEATY_GIZMO = 135
    KLUB_KLASSIK = 136
    BASSBOX_303 = 137
    FUZZI_FACE = 138
    DEAD_RINGER = 139
    TB_OR_NOT_TB = 140
    OOH_TO_EEE = 141
    BOLAND_BASS = 142
    MULTI_Q_VOX = 143
    TALKING_HEDZ = 144
    ZOOM_PEAKS = 145
    DJ_ALKALINE = 146
    BASS_TRACER = 147
    ROGUE_HERTZ = 148
    RAZOR_BLADES = 149
    RADIO_CRAZE = 150
    EEH_TO_AAH = 151
    UBU_ORATOR = 152
    DEEP_BOUCHE = 153
    FREAK_SHIFTA = 154
    CRUZ_PUSHER = 155
    ANGELZ_HAIRZ = 156
    DREAM_WEAVA = 157
    ACID_RAVAGE = 158
    BASS_O_MATIC = 159
    LUCIFERS_Q = 160
    TOOTH_COMB = 161
    EAR_BENDER = 162
    KLANG_KLING = 163


class GlideCurve(ByteEnum):
    LINEAR = 0
    LOG_LINEAR_1 = 1
    LOG_LINEAR_2 = 2
    LOG_LINEAR_3 = 3
    LOG_LINEAR_4 = 4
    LOG_LINEAR_5 = 5
    LOG_LINEAR_6 = 6
    LOG_LINEAR_7 = 7
    LOGARITHMIC = 8


class AssignGroup(ByteEnum):
    """Voice key-assign (polyphony) groups."""

    POLY_ALL = 0
    POLY16_A = 1
    POLY16_B = 2
    POLY8_A = 3
    POLY8_B = 4
    POLY8_C = 5
    POLY8_D = 6
    POLY4_A = 7
    POLY4_B = 8
    POLY4_C = 9
    POLY4_D = 10
    POLY2_A = 11
    POLY2_B = 12
    POLY2_C = 13
    POLY2_D = 14
    MONO_A = 15
    MONO_B = 16
    MONO_C = 17
    MONO_D = 18
    MONO_E = 19
    MONO_F = 20
    MONO_G = 21
    MONO_H = 22
    MONO_I = 23
    POLY_KEY_8_A = 24
    POLY_KEY_8_B = 25
    POLY_KEY_8_C = 26
    POLY_KEY_8_D = 27
    POLY_KEY_6_A = 28
    POLY_KEY_6_B = 29
    POLY_KEY_6_C = 30
    POLY_KEY_6_D = 31
    POLY_KEY_5_A = 32
    POLY_KEY_5_B = 33
    POLY_KEY_5_C = 34
    POLY_KEY_5_D = 35
    POLY_KEY_4_A = 36
    POLY_KEY_4_B = 37
    POLY_KEY_4_C = 38
    POLY_KEY_4_D = 39
    POLY_KEY_3_A = 40
    POLY_KEY_3_B = 41
    POLY_KEY_3_C = 42
    POLY_KEY_3_D = 43
    POLY_KEY_2_A = 44
    POLY_KEY_2_B = 45
    POLY_KEY_2_C = 46
    POLY_KEY_2_D = 47
    POLY_KEY_1_A = 48
    POLY_KEY_1_B = 49
    POLY_KEY_1_C = 50
    POLY_KEY_1_D = 51


class KeyMode(ByteEnum):
    POLY_NORMAL = 0
    SOLO_MULTI_TRIGGER = 1
    SOLO_MELODY_LAST = 2
    SOLO_MELODY_LOW = 3
    SOLO_MELODY_HIGH = 4
    SOLO_SYNTH_LAST = 5
    SOLO_SYNTH_LOW = 6
    SOLO_SYNTH_HIGH = 7
    SOLO_FINGERED_GLIDE = 8
    POLY_REL_TRIG_REL_VEL = 9
    POLY_REL_TRIG_NOTE_VEL = 10
    SOLO_REL_TRIG_REL_VEL = 11
    SOLO_REL_TRIG_NOTE_VEL = 12
    POLY_REL_TRIG_REL_VEL_2 = 13
    POLY_REL_TRIG_NOTE_VEL_2 = 14


class SampleChannel(IntEnum):
    """Which half of a sample buffer to slice."""

    MONO = 0
    LEFT = 0
    RIGHT = 1
