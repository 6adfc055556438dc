"""
Command-line interface for the card recommendation engine.
Recommends which owned card to use at a merchant, using the bundled card
catalog (or a JSON catalog file passed with --catalog).
"""

import argparse
import json
import sys
from pathlib import Path

from engine.catalog import CardCatalog, default_catalog, load_catalog
from engine.categories import category_display_name, classify, mcc_for_category
from engine.models import MERCHANT_CATEGORIES, Merchant, SpendCategory
from engine.recommender import all_cards_ranked, recommend


def load_cli_catalog(args) -> CardCatalog:
    """Load the catalog named by --catalog, or the bundled one."""
    if args.catalog:
        path = Path(args.catalog)
        if not path.exists():
            print(f"Error: Catalog file '{path}' not found.")
            sys.exit(1)
        return load_catalog(path)
    return default_catalog()


def build_merchant(args) -> Merchant:
    """
    Build the merchant from --mcc or --category.

    Args:
        args: Parsed command-line arguments with fields:
            - mcc: merchant category code (optional)
            - category: category name (optional)
            - merchant: merchant display name
    """
    if args.mcc:
        category = classify(args.mcc)
        mcc_code = args.mcc
    else:
        valid = [c.value for c in MERCHANT_CATEGORIES]
        if args.category not in valid:
            print(f"Error: Invalid category '{args.category}'. Must be one of: {', '.join(valid)}")
            sys.exit(1)
        category = SpendCategory(args.category)
        mcc_code = mcc_for_category(category)

    return Merchant(
        id=args.merchant.lower().replace(" ", "-"),
        name=args.merchant,
        category=category,
        mcc_code=mcc_code,
    )


def _print_rec(index, rec):
    print(f"{index}. {rec.card.name} ({rec.card.issuer}) - {rec.multiplier:g}x")
    print(f"   • {rec.reason}")
    print(f"   • {rec.estimated_reward}")


def cmd_recommend(args):
    """Print best card, alternatives and upsell for a merchant."""
    catalog = load_cli_catalog(args)
    merchant = build_merchant(args)
    result = recommend(merchant, args.cards, catalog)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    print(f"\n=== Card Recommendation ===\n")
    print(f"Merchant: {merchant.name} ({category_display_name(merchant.category)})")

    if result.best is None:
        print("\nNo recommendation available: none of your cards are in the catalog.")
    else:
        print(f"\nUse: {result.best.card.name} ({result.best.card.issuer})")
        print(f"   • {result.best.reason}")
        print(f"   • {result.best.estimated_reward}")

    if result.alternatives:
        print(f"\n--- Alternatives ---\n")
        for i, rec in enumerate(result.alternatives, 1):
            _print_rec(i, rec)

    if result.upsell is not None:
        print(f"\n--- Card you don't have ---\n")
        _print_rec(1, result.upsell)
    print()


def cmd_rank(args):
    """Print every owned card ranked for a merchant."""
    catalog = load_cli_catalog(args)
    merchant = build_merchant(args)
    ranked = all_cards_ranked(merchant, args.cards, catalog)

    if args.json:
        print(json.dumps([rec.to_dict() for rec in ranked], indent=2))
        return

    print(f"\n=== Ranked Cards at {merchant.name} ({category_display_name(merchant.category)}) ===\n")
    if not ranked:
        print("  (No cards found in the catalog)")
    for i, rec in enumerate(ranked, 1):
        _print_rec(i, rec)
    print()


def cmd_cards(args):
    """List the catalog, optionally filtered by a search query."""
    catalog = load_cli_catalog(args)
    cards = catalog.search(args.search) if args.search else list(catalog)

    if args.json:
        print(json.dumps([card.to_dict() for card in cards], indent=2))
        return

    for card in cards:
        print(f"{card.id:<28} {card.issuer} {card.name} "
              f"({card.base_reward:g}x {card.reward_type.value}, ${card.annual_fee:g}/yr)")


def cmd_classify(args):
    """Print the spending category for a merchant category code."""
    category = classify(args.code)
    print(f"{args.code}: {category.value} ({category_display_name(category)})")


def _add_merchant_args(subparser):
    group = subparser.add_mutually_exclusive_group(required=True)
    group.add_argument("--mcc", help="Merchant category code (e.g. 5812)")
    group.add_argument("--category", help="Spending category (e.g. dining)")
    subparser.add_argument("--merchant", default="Merchant", help="Merchant name")
    subparser.add_argument("--cards", nargs="*", default=[], help="Owned card IDs, in wallet order")
    subparser.add_argument("--json", action="store_true", help="Print JSON")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Credit Card Recommendation Engine CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--catalog", help="Path to a JSON card catalog (defaults to the bundled one)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Recommend command
    parser_recommend = subparsers.add_parser("recommend", help="Recommend a card for a merchant")
    _add_merchant_args(parser_recommend)

    # Rank command
    parser_rank = subparsers.add_parser("rank", help="Rank every owned card for a merchant")
    _add_merchant_args(parser_rank)

    # Cards command
    parser_cards = subparsers.add_parser("cards", help="List catalog cards")
    parser_cards.add_argument("--search", help="Filter by name or issuer")
    parser_cards.add_argument("--json", action="store_true", help="Print JSON")

    # Classify command
    parser_classify = subparsers.add_parser("classify", help="Classify a merchant category code")
    parser_classify.add_argument("code", help="Merchant category code")

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute command
    if args.command == "recommend":
        cmd_recommend(args)
    elif args.command == "rank":
        cmd_rank(args)
    elif args.command == "cards":
        cmd_cards(args)
    elif args.command == "classify":
        cmd_classify(args)


if __name__ == "__main__":
    main()
