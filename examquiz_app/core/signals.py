"""
Central signal registry.

Uses blinker (Flask's signal backend) so that modules can react to each
other's events without importing each other.

Usage:
    # Publisher
    from examquiz_app.core.signals import answer_recorded
    answer_recorded.send(None, learner_id=1, question_id=2, outcome='correct')

    # Subscriber (in a module's events.py)
    @answer_recorded.connect
    def on_answer_recorded(sender, **kwargs):
        ...
"""
from blinker import Namespace

learning_signals = Namespace()

# Fired after a Result row has been committed.
# Payload: learner_id, question_id, result_id, outcome
answer_recorded = learning_signals.signal('answer_recorded')
