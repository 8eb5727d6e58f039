import sys


class InboundAccessLog:
    # Breaks the design rules on purpose; everything under the "logging"
    # package is excluded from the checks.
    def rule_breaker_method(self):
        print("I'm breaking a Code Design Rule")
        print("I'm breaking a Code Design Rule", file=sys.stderr)
        raise Exception("Throwing an undesired exception")
