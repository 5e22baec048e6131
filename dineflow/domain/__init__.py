"""Domain entities, value objects, rules, errors and repository interfaces."""