import logging

from emitter import Correction, diff
from jamo import (
    compatibility_jamo, combine_final, combine_medial, final_index, initial_index,
    is_consonant, is_final, is_initial, is_vowel, medial_index, split_final, split_medial,
)

logger = logging.getLogger(__name__)

BASE = 0xAC00

EMPTY = "EMPTY"
HAS_INITIAL = "HAS_INITIAL"
HAS_MEDIAL = "HAS_MEDIAL"
HAS_INITIAL_MEDIAL = "HAS_INITIAL_MEDIAL"
HAS_INITIAL_MEDIAL_FINAL = "HAS_INITIAL_MEDIAL_FINAL"

# What a vowel does when no syllable is open
STANDALONE = "STANDALONE"
LITERAL = "LITERAL"

# Backspace granularity
JASO = "JASO"
CHAR = "CHAR"


def compose_syllable(initial, medial, final=None):
    return chr(BASE + (initial_index(initial) * 21 + medial_index(medial)) * 28 + final_index(final))


class CompositionState:
    def __init__(self):
        self.initial = None
        self.medial = None
        self.final = None
        self.last_emitted = ""

    def reset(self):
        self.initial = None
        self.medial = None
        self.final = None
        self.last_emitted = ""

    def is_empty(self):
        return self.initial is None and self.medial is None

    @property
    def name(self):
        if self.initial is None:
            return HAS_MEDIAL if self.medial else EMPTY
        if self.medial is None:
            return HAS_INITIAL
        if self.final is None:
            return HAS_INITIAL_MEDIAL
        return HAS_INITIAL_MEDIAL_FINAL

    def render(self):
        # Independent jamo
        if self.initial is None:
            return self.medial or ""
        if self.medial is None:
            return self.initial
        return compose_syllable(self.initial, self.medial, self.final)

    def __repr__(self):
        return "CompositionState(%r, %r, %r, last_emitted=%r)" % (
            self.initial, self.medial, self.final, self.last_emitted)


class HangulComposer:
    """Hangul syllable automaton emitting erase-and-retype corrections.

    Every call returns the list of corrections the caller has to play onto
    its output sink, in order. The composer never talks to the sink itself.
    """

    def __init__(self, vowel_policy=STANDALONE, moa_jjiki=False, backspace_mode=JASO):
        self.state = CompositionState()
        self.vowel_policy = vowel_policy
        self.moa_jjiki = moa_jjiki
        self.backspace_mode = backspace_mode

    def composed_string(self):
        return self.state.render()

    def reset(self):
        self.state.reset()

    def _refresh(self):
        text = self.state.render()
        correction = diff(self.state.last_emitted, text)
        self.state.last_emitted = text
        return [correction] if correction else []

    def flush(self):
        """Commit the open syllable.

        Returns (committed_text, corrections). Flushing an empty state
        returns ("", []).
        """
        if self.state.is_empty():
            return "", []
        corrections = self._refresh()
        text = self.state.last_emitted
        self.state.reset()
        return text, corrections

    def process(self, c):
        c = compatibility_jamo(c)
        st = self.state
        corrections = []
        # A flush or a carried final re-queues the keystroke once; after that
        # the state is EMPTY or HAS_INITIAL, neither of which re-queues.
        pending = c
        while pending is not None:
            c, pending = pending, None

            if is_vowel(c):
                if st.final:
                    keep, carry = split_final(st.final)
                    if carry is None:
                        keep, carry = None, st.final
                    st.final = keep
                    corrections += self.flush()[1]
                    st.initial = carry
                    pending = c
                    continue
                if st.medial:
                    combined = combine_medial(st.medial, c)
                    if not combined:
                        corrections += self.flush()[1]
                        pending = c
                        continue
                    st.medial = combined
                elif st.initial:
                    st.medial = c
                elif self.vowel_policy == LITERAL:
                    corrections.append(Correction(0, c))
                    continue
                else:
                    st.medial = c

            elif is_consonant(c):
                if st.final:
                    combined = combine_final(st.final, c)
                    if not combined:
                        corrections += self.flush()[1]
                        pending = c
                        continue
                    st.final = combined
                elif st.medial and st.initial:
                    if not is_final(c):
                        corrections += self.flush()[1]
                        pending = c
                        continue
                    st.final = c
                elif st.medial and self.moa_jjiki and is_initial(c):
                    st.initial = c
                elif not st.is_empty():
                    corrections += self.flush()[1]
                    pending = c
                    continue
                elif is_initial(c):
                    st.initial = c
                else:
                    # Compound finals such as ㄳ cannot open a syllable.
                    corrections.append(Correction(0, c))
                    continue

            else:
                corrections += self.flush()[1]
                return corrections

            corrections += self._refresh()

        logger.debug("process %r -> %s %r", c, st.name, st.render())
        return corrections

    def backspace(self):
        """Decompose the open syllable by one jamo.

        Returns (consumed, corrections). When nothing is open the key is not
        consumed and the caller deletes a committed character itself.
        """
        st = self.state
        if st.is_empty():
            return False, []

        if self.backspace_mode == CHAR:
            st.initial = None
            st.medial = None
            st.final = None
        elif st.final:
            first, second = split_final(st.final)
            st.final = first if second else None
        elif st.medial:
            first, second = split_medial(st.medial)
            st.medial = first if second else None
        else:
            st.initial = None

        corrections = self._refresh()
        if st.is_empty():
            st.reset()
        return True, corrections
