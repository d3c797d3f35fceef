from grocery.identity.customer import customer, events, management, repository  # noqa: F401
