"""Built-in output formats. Each module registers exactly one TemplateSpec."""
