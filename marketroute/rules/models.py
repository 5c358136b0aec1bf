from pydantic import BaseModel, ConfigDict, Field, model_validator


class LocaleRule(BaseModel):
    code: str
    display_name: str

class MarketRule(BaseModel):
    code: str
    url_prefix: str = ""
    # Fallback chain, most specific first
    locales: list[str] = Field(min_length=1)

class SiteaccessRule(BaseModel):
    name: str
    url_prefix: str = ""
    locale: str
    market: str

class AdminRules(BaseModel):
    name: str = "admin"
    url_prefix: str = "/admin"

class InterceptorRules(BaseModel):
    enabled: bool = True
    asset_prefixes: list[str] = Field(default_factory=lambda: ["/bundles", "/assets"])
    methods: list[str] = Field(default_factory=lambda: ["GET", "HEAD"])
    preserve_utm_params: bool = False

class RedirectRules(BaseModel):
    list_limit: int = Field(default=1000, ge=1, le=1000)

class RoutingRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    global_locale: str
    global_market: str
    default_siteaccess: str
    locales: list[LocaleRule]
    markets: list[MarketRule]
    siteaccesses: list[SiteaccessRule]
    admin: AdminRules = Field(default_factory=AdminRules)
    interceptor: InterceptorRules = Field(default_factory=InterceptorRules)
    redirects: RedirectRules = Field(default_factory=RedirectRules)

    @model_validator(mode="after")
    def check_tables(self) -> "RoutingRules":
        locale_codes = [loc.code for loc in self.locales]
        market_codes = [m.code for m in self.markets]
        names = [s.name for s in self.siteaccesses]

        for label, keys in (("locale", locale_codes), ("market", market_codes), ("siteaccess", names)):
            dupes = {k for k in keys if keys.count(k) > 1}
            if dupes:
                raise ValueError(f"duplicate {label} keys: {sorted(dupes)}")

        if self.global_locale not in locale_codes:
            raise ValueError(f"global_locale '{self.global_locale}' is not a configured locale")
        if self.global_market not in market_codes:
            raise ValueError(f"global_market '{self.global_market}' is not a configured market")
        if self.default_siteaccess not in names:
            raise ValueError(
                f"default_siteaccess '{self.default_siteaccess}' is not a configured siteaccess"
            )
        if self.admin.name in names:
            raise ValueError(f"admin siteaccess '{self.admin.name}' must not be listed as public")
        if not self.admin.url_prefix.startswith("/") or self.admin.url_prefix == "/":
            raise ValueError("admin url_prefix must be a non-root path starting with '/'")

        for market in self.markets:
            unknown = [c for c in market.locales if c not in locale_codes]
            if unknown:
                raise ValueError(f"market '{market.code}' references unknown locales {unknown}")
            if market.locales[-1] != self.global_locale:
                raise ValueError(
                    f"market '{market.code}' fallback chain must end in '{self.global_locale}'"
                )

        prefixes: dict[str, str] = {self.admin.url_prefix: self.admin.name}
        for sa in self.siteaccesses:
            if sa.locale not in locale_codes:
                raise ValueError(f"siteaccess '{sa.name}' references unknown locale '{sa.locale}'")
            if sa.market not in market_codes:
                raise ValueError(f"siteaccess '{sa.name}' references unknown market '{sa.market}'")
            if not sa.url_prefix:
                if sa.name != self.default_siteaccess:
                    raise ValueError(f"only the default siteaccess may have an empty prefix ('{sa.name}')")
                continue
            if not sa.url_prefix.startswith("/") or sa.url_prefix.endswith("/"):
                raise ValueError(f"siteaccess '{sa.name}' prefix must look like '/segment'")
            if sa.url_prefix in prefixes:
                raise ValueError(
                    f"siteaccess '{sa.name}' reuses prefix '{sa.url_prefix}' "
                    f"of '{prefixes[sa.url_prefix]}'"
                )
            prefixes[sa.url_prefix] = sa.name

        bound = {sa.locale for sa in self.siteaccesses}
        orphans = [c for c in locale_codes if c not in bound]
        if orphans:
            raise ValueError(f"locales without a siteaccess: {orphans}")

        return self
