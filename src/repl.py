"""
Zaban Programming Language REPL
Interactive scan-and-print loop
"""

import logging
from typing import List
from lexer import Scanner, Token, TokenKind
from printer import print_tokens, format_summary
from settings import ScannerSettings

logger = logging.getLogger(__name__)

OPENERS = {'(': ')', '{': '}'}

class REPL:
    def __init__(self, settings: ScannerSettings = ScannerSettings()):
        self.settings = settings
        self.show_lines = settings.show_lines
        self.summary = settings.summary
        self.multiline_input = ""
        self.prompt = "zaban> "
        self.continuation_prompt = "...    "

    def run(self):
        """Start the REPL"""
        print("Zaban lexer")
        print("Type 'help' for help, 'exit' to quit.")
        print()

        while True:
            try:
                if self.multiline_input:
                    line = input(self.continuation_prompt)
                else:
                    line = input(self.prompt)

                if not self.multiline_input and self.handle_command(line.strip()):
                    if line.strip() in ['exit', 'quit']:
                        print("Goodbye!")
                        break
                    continue

                self.multiline_input += line + "\n"

                if self.is_complete_input(self.multiline_input):
                    self.evaluate_input(self.multiline_input)
                    self.multiline_input = ""

            except KeyboardInterrupt:
                print("\nKeyboardInterrupt")
                self.multiline_input = ""
            except EOFError:
                print("\nGoodbye!")
                break

    def handle_command(self, command: str) -> bool:
        """Run a REPL command; returns False when the text is source to scan."""
        if command in ['exit', 'quit']:
            return True
        if command == 'help':
            self.show_help()
            return True
        if command == 'clear':
            print("\033[2J\033[H")
            return True

        parts = command.split()
        if parts and parts[0] in ['lines', 'summary'] and len(parts) <= 2:
            name = parts[0]
            if len(parts) == 2 and parts[1] in ['on', 'off']:
                enabled = parts[1] == 'on'
                if name == 'lines':
                    self.show_lines = enabled
                else:
                    self.summary = enabled
            current = self.show_lines if name == 'lines' else self.summary
            print(f"{name.capitalize()} {'enabled' if current else 'disabled'}")
            return True
        return False

    def scan(self, input_text: str) -> List[Token]:
        return Scanner.from_settings(input_text, self.settings).scan()

    def is_complete_input(self, input_text: str) -> bool:
        """Input is complete once every ( and { has been closed"""
        depth = {opener: 0 for opener in OPENERS}
        closers = {closer: opener for opener, closer in OPENERS.items()}

        for token in self.scan(input_text):
            if token.kind != TokenKind.PUNCTUATOR:
                continue
            if token.lexeme in depth:
                depth[token.lexeme] += 1
            elif token.lexeme in closers:
                depth[closers[token.lexeme]] -= 1

        return all(count <= 0 for count in depth.values())

    def evaluate_input(self, input_text: str):
        tokens = self.scan(input_text)
        logger.info("scanned %d tokens", len(tokens))
        print_tokens(tokens, show_line=self.show_lines)
        if self.summary:
            print(format_summary(tokens))

    def show_help(self):
        """Show help information"""
        help_text = """
Zaban Lexer REPL Help

Commands:
  help              - Show this help
  exit, quit        - Exit the REPL
  clear             - Clear the screen
  lines on/off      - Show/hide source line numbers
  summary on/off    - Show/hide token counts after each input

Keywords:
  hindsa (int)      asharia (float)   agar (if)
  phir (else)       lekinagar (else if)
  jabtk (while)     niklo (break)     wapsi (return)
  irshaad (print)   chalooo (continue)

Example:
  zaban> hindsa x = 10;
  Type: KEYWORD, Value: hindsa
  Type: IDENTIFIER, Value: x
  Type: OPERATOR, Value: =
  Type: INTEGER_LITERAL, Value: 10
  Type: PUNCTUATOR, Value: ;
"""
        print(help_text)
