"""Console games: 7 up and down, a multiple-choice quiz and guess the number."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from enum import Enum


class Move(Enum):
    """A guess about the next number in 7 up and down."""

    HIGH = "H"
    SEVEN = "7"
    LOW = "L"


@dataclass(frozen=True)
class RoundResult:
    """What one round of 7 up and down gave."""

    move: Move
    number: int
    correct: bool
    points: int
    lives_gained: int
    streak_bonus: bool


class SevenUpGame:
    """Guess whether a number from 2 to 12 is above 7, below 7 or exactly 7."""

    LOWEST = 2
    HIGHEST = 12
    STREAK = 5

    def __init__(self, rng=None, lives=3):
        self.rng = rng if rng is not None else random.Random()
        self.life = lives
        self.score = 0
        self.row = 0
        self.last_number = 7

    @property
    def over(self):
        return self.life <= 0

    def play_round(self, move, number=None):
        """Play ``move`` (H, L or 7) against ``number``, drawn at random when not given."""
        if self.over:
            raise RuntimeError("the game is over")
        try:
            chosen = Move(str(move).upper())
        except ValueError:
            raise ValueError(f"invalid move: {move!r}") from None
        if number is None:
            number = self.rng.randint(self.LOWEST, self.HIGHEST)
        elif not self.LOWEST <= number <= self.HIGHEST:
            raise ValueError(f"number {number} is outside {self.LOWEST}..{self.HIGHEST}")
        self.last_number = number
        correct = {
            Move.HIGH: number > 7,
            Move.SEVEN: number == 7,
            Move.LOW: number < 7,
        }[chosen]
        if not correct:
            self.row = 0
            self.life -= 1
            return RoundResult(chosen, number, False, 0, 0, False)
        self.row += 1
        points = 25 if chosen is Move.SEVEN else 10
        lives = 1 if chosen is Move.SEVEN else 0
        bonus = self.row % self.STREAK == 0
        if bonus:
            points += 5
            lives += 1
        self.score += points
        self.life += lives
        return RoundResult(chosen, number, True, points, lives, bonus)


@dataclass(frozen=True)
class Question:
    """A multiple-choice question; ``correct`` is the 1-based number of the right answer."""

    text: str
    answers: tuple
    correct: int
    score: int = 10

    def __post_init__(self):
        if not 1 <= self.correct <= len(self.answers):
            raise ValueError("the correct answer must be one of the answers")

    def check(self, answer):
        """Tell whether ``answer`` is the right one."""
        return answer == self.correct


class Quiz:
    """A list of questions and the running total of points earned."""

    def __init__(self, questions, pass_mark=70):
        self.questions = list(questions)
        self.pass_mark = pass_mark
        self.total = 0

    @property
    def max_score(self):
        return sum(question.score for question in self.questions)

    @property
    def passed(self):
        return self.total >= self.pass_mark

    def answer(self, question, guess):
        """Record ``guess`` for ``question`` and return the points it earned."""
        points = question.score if question.check(guess) else 0
        self.total += points
        return points


class Outcome(Enum):
    """The verdict on one guess of the hidden number."""

    TOO_HIGH = "too high"
    TOO_LOW = "too low"
    CORRECT = "correct"
    TOO_LATE = "correct, but out of attempts"


class NumberGuess:
    """Guess a hidden number from 1 to 100 within a few attempts."""

    LOWEST = 1
    HIGHEST = 100

    def __init__(self, number=None, rng=None, max_attempts=2):
        if number is None:
            chooser = rng if rng is not None else random.Random()
            number = chooser.randint(self.LOWEST, self.HIGHEST)
        elif not self.LOWEST <= number <= self.HIGHEST:
            raise ValueError(f"number {number} is outside {self.LOWEST}..{self.HIGHEST}")
        self.number = number
        self.max_attempts = max_attempts
        self.attempts = 0
        self.finished = False

    def guess(self, value):
        """Judge ``value`` against the hidden number."""
        if self.finished:
            raise RuntimeError("the number has already been guessed")
        self.attempts += 1
        if value > self.number:
            return Outcome.TOO_HIGH
        if value < self.number:
            return Outcome.TOO_LOW
        self.finished = True
        return Outcome.CORRECT if self.attempts <= self.max_attempts else Outcome.TOO_LATE


def _default_questions():
    return [
        Question("Question : ", ("Answer 1", "Answer 2", "Answer 3", "Answer 4"), 3, 10)
        for _ in range(10)
    ]


def _read_int(prompt):
    try:
        return int(input(prompt).strip())
    except ValueError:
        return 0


def _play_seven_up(rng):
    game = SevenUpGame(rng=rng)
    print("\t\t\t 7 UP AND DOWN")
    print(f"\n\tLife:\t{game.life}\t\t\t\t Score: {game.score:4d}\n")
    print("1. The numbers generated by the system will be between 2-12")
    print("2. Correct guessing the side High/Low             ->  +10 points")
    print("3. Correct guessing the side High/Low 5 in a row  ->  +5 points extra + 1 life")
    print("4. Guessing the exact 7                           ->  +25 points + 1 life")
    print("5. Guessing wrong                                 ->  -1 life")
    player = input("\nEnter the name of Player\n")[:20]
    print(f"\n{player}   Lesgooooo.....")
    while not game.over:
        print(f"\n\tLife:\t{game.life}\t\t\t\t Score: {game.score:4d}\n")
        print("\t\t\t   +-------+")
        print(f"\t\t\t   |  {game.last_number:2d}   |")
        print("\t\t\t   +-------+")
        move = input("\n(H->High, L->Low and 7->for exact 7)\nEnter the move\n").strip()
        try:
            result = game.play_round(move[:1])
        except ValueError:
            print("\nInvalid Move!!")
            continue
        if result.correct:
            print(f"\nCorrect Guess You get {game.row} in a row")
        else:
            print("\nIncorrect Guess")
        print(f"The random generated number is {result.number}")
        if result.streak_bonus:
            print("\nYou won an extra 5 points and 1 life")
    print("\t\t\t\t 7 UP AND DOWN")
    print(f"\n\t\t\tThanks {player} for Playing the game")
    print(f"\n\t\t\t\tYour Score is: {game.score:4d}\n")


def _play_quiz():
    print("\n\t\t\t\tTHE DAILY QUIZ")
    input("\nPress Enter to start the quiz... \n")
    name = input("What is your name?\n").strip()
    _read_int("How old are you?\n")
    respond = input(f"Are you ready to take the quiz {name}? yes/no\n").strip()
    if respond != "yes":
        print("Okay Good Bye!")
        return
    print("\nGood Luck!")
    quiz = Quiz(_default_questions())
    for question in quiz.questions:
        print(f"\n{question.text}")
        for number, text in enumerate(question.answers, start=1):
            print(f"{number}. {text}")
        guess = _read_int("\nWhat is your answer?(in number)\n")
        points = quiz.answer(question, guess)
        if points:
            print(f"\nCorrect !\nScore = {points} out of {question.score}!\n")
        else:
            print(f"\nWrong !\nScore = 0 out of {question.score}!")
            print(f"Correct answer = {question.correct}.\n")
    print(f"Total Score = {quiz.total} out of {quiz.max_score}")
    if quiz.passed:
        print("Congrats you passed the quiz!")
    else:
        print("Alas! You failed the quiz.\nBetter luck next time.")


def _play_guess(rng):
    game = NumberGuess(rng=rng)
    print(f"Guess the number between {game.LOWEST} to {game.HIGHEST}")
    print(f"guess in {game.max_attempts} attempts")
    while not game.finished:
        outcome = game.guess(_read_int(""))
        if outcome is Outcome.TOO_HIGH:
            print("too high, guess lower please")
        elif outcome is Outcome.TOO_LOW:
            print("too low, guess higher please")
        elif outcome is Outcome.TOO_LATE:
            print(f"The random number is {game.number}")
        else:
            print(f"you guessed in {game.attempts} attempt")


def main(argv=None):
    """Start one of the games named on the command line."""
    parser = argparse.ArgumentParser(prog="algonotes-games", description=__doc__)
    games = parser.add_subparsers(dest="game", required=True)
    for name in ("sevenup", "guess"):
        sub = games.add_parser(name)
        sub.add_argument("--seed", type=int, default=None)
    games.add_parser("quiz")
    args = parser.parse_args(argv)
    try:
        if args.game == "sevenup":
            _play_seven_up(random.Random(args.seed))
        elif args.game == "guess":
            _play_guess(random.Random(args.seed))
        else:
            _play_quiz()
    except EOFError:
        return 1
    return 0