"""Student-text assessor action prompts.

Formatted with ``subject``, ``grade``, ``assignment`` and ``text``.
"""

ASSESS_PROMPT = """\
Agera som en examinerad lärare i {subject} för {grade}.
Uppgiften var: "{assignment}".

Din uppgift är att bedöma följande elevtext utifrån kunskapskraven i Lgr22 (eller motsvarande för gymnasiet/vux).
Ge en nyanserad bedömning med styrkor och utvecklingsområden.

Elevtext:
"{text}"
"""

FEEDBACK_PROMPT = """\
Agera som en lärare i {subject} för {grade}.
Uppgiften var: "{assignment}".

Ge formativ respons på följande elevtext. Fokusera på vad eleven har gjort bra och ge konkreta "two stars and a wish" för hur eleven kan ta texten till nästa nivå.
Tilltala eleven direkt ("Du har...").

Elevtext:
"{text}"
"""

ANALYSIS_PROMPT = """\
Gör en språklig analys av följande elevtext i {subject} för {grade}.
Uppgiften var: "{assignment}".

Analysera meningsbyggnad, ordförråd, struktur, stavning och grammatik. Peka på återkommande fel och mönster.

Elevtext:
"{text}"
"""
