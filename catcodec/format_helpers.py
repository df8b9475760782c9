# Credits: catcodec Team - 2026

class FormatHelper:
    # RIFF/WAVE envelope
    riff_header_size = 44
    fmt_chunk_size = 16
    audio_format_pcm = 1
    supported_channels = (1,)
    supported_sample_rates = (11025, 22050, 44100)
    supported_bits_per_sample = (8, 16)

    # Cat archive
    table_entry_size = 8
    new_format_flag = 0x80000000
    offset_mask = 0x7FFFFFFF
    max_entry_size = 0xFFFFFFFF
    max_string_length = 255 # length byte, terminator included
    string_encoding = "latin-1" # every byte maps to exactly one character
    spacer_byte = 0

    # Old archives carry one raw PCM entry without a RIFF envelope
    corrupt_sound_name = "Corrupt sound"
    legacy_channels = 1
    legacy_sample_rate = 11025
    legacy_bits_per_sample = 8

    cat_suffix = ".cat"
    sfo_suffix = ".sfo"
    new_suffix = ".new"
    bak_suffix = ".bak"
