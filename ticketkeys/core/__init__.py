"""Core of ticketkeys: configuration, errors, logging and crypto."""
