"""Product Reviews management CLI.

Creates and drops the relational schema, and gives developers a way to load
a shop record without going through the platform install flow.

Usage:
    python src/manage.py setup-db
    python src/manage.py drop-db
    python src/manage.py add-shop avada-second-chance.myshopify.com --id DGmlZG6trNcllnVSkOQ6
    python src/manage.py show-shop avada-second-chance.myshopify.com
"""

import argparse
import json
import sys


def _domain():
    from reviews.domain import reviews

    reviews.init()
    return reviews


def setup_database():
    from reviews.utils.db import setup_db

    domain = _domain()
    print("Creating reviews database schema...")
    touched = setup_db(domain)
    print(f"  schema ready on: {', '.join(touched) or 'no relational providers'}")


def drop_database():
    from reviews.utils.db import drop_db

    domain = _domain()
    print("Dropping reviews database schema...")
    touched = drop_db(domain)
    print(f"  schema dropped on: {', '.join(touched) or 'no relational providers'}")


def add_shop(shopify_domain, name=None, email=None, shop_id=None):
    from reviews.shop.shop import Shop

    domain = _domain()
    with domain.domain_context():
        repo = domain.repository_for(Shop)
        existing = repo.find_by_domain(shopify_domain)
        if existing is not None:
            print(f"Shop {shopify_domain} already exists with id {existing.id}")
            return existing
        shop = Shop.register(shopify_domain, name=name, email=email, shop_id=shop_id)
        repo.add(shop)
        print(f"Added shop {shopify_domain} with id {shop.id}")
        return shop


def show_shop(shopify_domain):
    from reviews.shop.shop import Shop

    domain = _domain()
    with domain.domain_context():
        shop = domain.repository_for(Shop).find_by_domain(shopify_domain)
        if shop is None:
            print(f"No shop found for domain {shopify_domain}", file=sys.stderr)
            return None
        print(json.dumps(shop.to_dict(), indent=2, default=str))
        return shop


def main(argv=None):
    parser = argparse.ArgumentParser(description="Product Reviews management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    add_parser = subparsers.add_parser("add-shop", help="Insert a shop record")
    add_parser.add_argument("domain", help="Public shop domain, e.g. my-store.myshopify.com")
    add_parser.add_argument("--id", dest="shop_id", help="Use this identifier instead of a generated one")
    add_parser.add_argument("--name")
    add_parser.add_argument("--email")

    show_parser = subparsers.add_parser("show-shop", help="Print the shop registered under a domain")
    show_parser.add_argument("domain")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "add-shop":
        add_shop(args.domain, name=args.name, email=args.email, shop_id=args.shop_id)
    elif args.command == "show-shop":
        if show_shop(args.domain) is None:
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
