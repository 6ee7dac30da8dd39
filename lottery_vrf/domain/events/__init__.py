"""Domain events observed on emitters."""

from lottery_vrf.domain.events.observed_event import (
    CONSUMER_ADDED_EVENT,
    CONSUMER_REMOVED_EVENT,
    RAFFLE_ENTER_EVENT,
    RANDOM_WORDS_FULFILLED_EVENT,
    RANDOM_WORDS_REQUESTED_EVENT,
    REQUESTED_RAFFLE_WINNER_EVENT,
    SUBSCRIPTION_CREATED_EVENT,
    SUBSCRIPTION_FUNDED_EVENT,
    WINNER_PICKED_EVENT,
    ObservedEvent,
)

__all__: list[str] = [
    "CONSUMER_ADDED_EVENT",
    "CONSUMER_REMOVED_EVENT",
    "ObservedEvent",
    "RAFFLE_ENTER_EVENT",
    "RANDOM_WORDS_FULFILLED_EVENT",
    "RANDOM_WORDS_REQUESTED_EVENT",
    "REQUESTED_RAFFLE_WINNER_EVENT",
    "SUBSCRIPTION_CREATED_EVENT",
    "SUBSCRIPTION_FUNDED_EVENT",
    "WINNER_PICKED_EVENT",
]
