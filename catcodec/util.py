# Credits: catcodec Team - 2026

import os

from catcodec.format_helpers import FormatHelper


class Utils:
    @staticmethod
    def sfo_path_for(cat_file):
        """sample.cat -> sample.sfo, or None when the extension is not .cat"""
        base, ext = os.path.splitext(cat_file)
        if ext != FormatHelper.cat_suffix:
            return None
        return base + FormatHelper.sfo_suffix
