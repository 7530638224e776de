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
The suffix tables of the Spanish stemming algorithm, one per step. Each table
is an ordered tuple scanned from the front; the first entry that matches
wins.

Every pattern is anchored at the end of the text it is searched in, and is
always searched in a region (never in the whole word), so a match can only
remove characters inside that region. Because the search finds the leftmost
match, the longest suffix of the region matching the pattern is found.
"""

from collections import namedtuple
from typing import Optional

from raiz.util import rcompile


class Rule(namedtuple("Rule", "pattern region replacement")):
    """
    A (pattern, region, replacement) record. ``region`` names the region the
    pattern must match in: "r1", "r2" or "rv".
    """

    def search(self, text: str) -> Optional[str]:
        """
        Returns the suffix of ``text`` (the text of this rule's region) that
        this rule removes, or None if the rule does not apply.
        """

        m = self.pattern.search(text)
        return m.group(0) if m else None


def rule(pattern: str, region: str, replacement: str="") -> Rule:
    return Rule(rcompile(pattern), region, replacement)


# Step 0: attached pronouns. Group 1 is the verb ending (gerund or infinitive)
# the pronoun is attached to, group 2 is the pronoun.

PRONOUN_ENDINGS = ("i\xe9ndo", "\xe1ndo", "\xe1r", "\xe9r", "\xedr",
                   "ando", "iendo", "ar", "er", "ir", "yendo")
PRONOUNS = ("me", "se", "sela", "selo", "selas", "selos", "la", "le", "lo",
            "las", "les", "los", "nos")

pronoun_rule = rule("(i[e\xe9]ndo|[a\xe1]ndo|[a\xe1e\xe9i\xed]r|u?yendo)"
                    "(sel[ao]s?|l[aeo]s?|nos|se|me)$", "rv")

# Step 1: standard suffixes, in priority order

standard_rules = (
    rule("(anzas?|ic[oa]s?|ismos?|[ai]bles?|istas?|os[oa]s?|[ai]mientos?)$",
         "r2"),
    rule("(ic)?(adora?|aci\xf3n|ador[ae]s|aciones|antes?|ancias?)$", "r2"),
    rule("log\xedas?$", "r2", "log"),
    rule("(uci\xf3n|uciones)$", "r2", "u"),
    rule("encias?$", "r2", "ente"),
    rule("(os|ic|ad|(at)?iv)amente$", "r2"),
    rule("amente$", "r1"),
    rule("(ante|[ai]ble)?mente$", "r2"),
    rule("(abil|ic|iv)?idad(es)?$", "r2"),
    rule("(at)?iv[ao]s?$", "r2"),
)

# Step 2a: verb suffixes beginning with "y". Only removed after a "u".

Y_VERB_SUFFIXES = ("ya", "ye", "yan", "yen", "yeron", "yendo", "yo", "y\xf3",
                   "yas", "yes", "yais", "yamos")

y_verb_rule = rule("(y[ae]n?|yeron|yendo|y[o\xf3]|y[ae]s|yais|yamos)$", "rv")

# Step 2b: other verb suffixes, grouped by length and tried longest first

other_verb_rules = (
    # 7 characters
    rule("([aei]r\xeda|i\xe9(ra|se))mos$", "rv"),
    # 6 characters
    rule("([aei]re|\xe1[br]a|\xe1se)mos$", "rv"),
    # 5 characters
    rule("([aei]r\xeda[ns]|[aei]r\xe9is|ie((ra|se)[ns]|ron|ndo)|a[br]ais"
         "|aseis|\xedamos)$", "rv"),
    # 4 characters
    rule("([aei](r\xe1[ns]|r\xeda)|a[bdr]as|id[ao]s|\xedais|([ai]m|ad)os"
         "|ie(se|ra)|[ai]ste|aban|ar[ao]n|ase[ns]|ando)$", "rv"),
    # 3 characters
    rule("([aei]r[\xe1\xe9]|a[bdr]a|[ai]d[ao]|\xeda[ns]|\xe1is|ase)$", "rv"),
    # 2 characters
    rule("(\xed[as]|[aei]d|a[ns]|i\xf3|[aei]r)$", "rv"),
)

# Removed after the verb suffixes above, then "gu" loses its "u"

gu_verb_rule = rule("(en|es|\xe9is|emos)$", "rv")

# Step 3: residual suffixes

residual_rule = rule("(os|a|o|\xe1|\xed|\xf3)$", "rv")
residual_e_rule = rule("u?[e\xe9]$", "rv")
