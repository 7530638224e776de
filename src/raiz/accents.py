# coding=utf-8

# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

"""
The fixed table of acute-accented Spanish vowels and their plain
counterparts.

Diaeresis (``ü``) is not in the table. It marks a pronounced ``u`` after
``g`` and survives stemming.
"""

# Map each accented vowel to its unaccented counterpart

ACCENTS = {"\xe1": "a",  # á
           "\xe9": "e",  # é
           "\xed": "i",  # í
           "\xf3": "o",  # ó
           "\xfa": "u",  # ú
           }

# The inverse mapping, plain vowel to its acute form

UNACCENTED = dict((plain, accented) for accented, plain in ACCENTS.items())

# Translation table for str.translate()

_charmap = dict((ord(accented), plain) for accented, plain in ACCENTS.items())


def strip_accents(text: str) -> str:
    """
    Replaces every acute-accented vowel in the text with the plain vowel.

    >>> strip_accents("haci\xe9ndo")
    'haciendo'
    """

    return text.translate(_charmap)


def has_accents(text: str) -> bool:
    return any(char in ACCENTS for char in text)
