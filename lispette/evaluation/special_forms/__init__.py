"""Registry of special forms for the Lispette evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application.
Handlers receive (tail, env, evaluate_fn) and return a value, an Escape, or a
TailCall for the trampoline to continue with.
"""

from lispette.types.symbol import QUOTE, IF, SET, DEFINE, LAMBDA, BEGIN
from lispette.evaluation.special_forms.quote_form import quote_form
from lispette.evaluation.special_forms.if_form import if_form
from lispette.evaluation.special_forms.set_form import set_form
from lispette.evaluation.special_forms.define_form import define_form
from lispette.evaluation.special_forms.lambda_form import lambda_form
from lispette.evaluation.special_forms.begin_form import begin_form

SPECIAL_FORMS = {
    QUOTE: quote_form,
    IF: if_form,
    SET: set_form,
    DEFINE: define_form,
    LAMBDA: lambda_form,
    BEGIN: begin_form,
}
