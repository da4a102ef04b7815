"""
File: console.py
Purpose: Line-oriented console input/output used by every interactive action.
"""
import getpass


class Console:
    """
    Thin wrapper around input(), print() and getpass so actions can be driven
    by a script in tests.
    """
    def __init__(self, input_func=input, output_func=print, password_func=getpass.getpass):
        self._input = input_func
        self._output = output_func
        self._password = password_func

    def echo(self, text=""):
        self._output(text)

    def get_string(self, prompt, default=None):
        """
        Reads one line. An empty answer returns `default` when one is given.
        Never returns None when no default is given.
        """
        text = self._input(prompt)
        if not text and default is not None:
            return default
        return text if text is not None else ""

    def get_password(self, prompt):
        """Reads a password without echoing it where the terminal allows."""
        return self._password(prompt)

    def get_text_option(self, case_sensitive, prompt, default, options):
        """
        Asks until the answer equals one of `options` (compared as strings).
        A single option is returned without asking.
        """
        if not options:
            return None
        if any(option is None for option in options):
            raise ValueError("get_text_option(): null options are not allowed.")

        choices = [str(option) for option in options]
        if len(choices) == 1:
            return choices[0]

        while True:
            answer = self.get_string(prompt, default)
            for choice in choices:
                matched = (answer == choice) if case_sensitive else (answer.lower() == choice.lower())
                if matched:
                    return choice
            self.echo("Invalid option selected.\n")
