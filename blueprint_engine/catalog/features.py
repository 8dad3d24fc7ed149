"""Feature definitions.

Each entry lists the stack additions, backend module, milestone tasks, and
(optionally) the Spring Boot endpoint a feature contributes.  Snippet hints
are written at column zero; the snippet composer indents them into the
controller class body.
"""

from __future__ import annotations

import textwrap
from types import MappingProxyType
from typing import Mapping

from .models import FeatureDefinition, FeatureKey, ModuleSpec, StackSpec


def _hint(source: str) -> str:
    return textwrap.dedent(source).strip("\n")


_FEATURES: tuple[FeatureDefinition, ...] = (
    FeatureDefinition(
        key=FeatureKey.AUTHENTICATION,
        label="Authentication & Roles",
        description="Secure login, registration, and role-based access using Spring Security and JWT.",
        stack_additions=StackSpec(
            backend=("Spring Security", "JSON Web Tokens (jjwt)"),
            frontend=("NextAuth.js",),
            database=("Users & roles tables",),
        ),
        module=ModuleSpec(
            title="Auth Service",
            description="Handles registration, login, password hashing with BCrypt, and JWT issuance with role claims.",
        ),
        tasks=(
            "Model User and Role entities with BCrypt password hashing",
            "Configure the Spring Security filter chain with JWT validation",
            "Build login and registration pages wired to the auth API",
        ),
        snippet_hint=_hint(
            """
            @PostMapping("/auth/login")
            public ResponseEntity<Map<String, String>> login(@RequestBody Map<String, String> credentials) {
                String token = authService.authenticate(credentials.get("email"), credentials.get("password"));
                return ResponseEntity.ok(Map.of("token", token));
            }
            """
        ),
    ),
    FeatureDefinition(
        key=FeatureKey.CRUD,
        label="CRUD Management",
        description="Create, read, update, and delete the core records of your domain with validation.",
        stack_additions=StackSpec(
            backend=("Spring Data JPA", "Bean Validation (Hibernate Validator)"),
            frontend=("React Hook Form",),
            tooling=("Flyway migrations",),
        ),
        module=ModuleSpec(
            title="Resource Management",
            description="Service and repository layers exposing validated REST endpoints for the domain's core entities.",
        ),
        tasks=(
            "Design JPA entities and Flyway migration scripts",
            "Implement service and repository layers with DTO mapping",
            "Build list, detail, and edit screens with form validation",
        ),
        snippet_hint=_hint(
            """
            @PutMapping("/{id}")
            public ResponseEntity<Object> update(@PathVariable Long id, @Valid @RequestBody Map<String, Object> changes) {
                return ResponseEntity.ok(service.update(id, changes));
            }

            @DeleteMapping("/{id}")
            public ResponseEntity<Void> delete(@PathVariable Long id) {
                service.delete(id);
                return ResponseEntity.noContent().build();
            }
            """
        ),
    ),
    FeatureDefinition(
        key=FeatureKey.FILE_UPLOAD,
        label="File Uploads",
        description="Upload, store, and serve documents or images attached to records.",
        stack_additions=StackSpec(
            backend=("Spring Web Multipart",),
            database=("Object storage (MinIO / AWS S3)",),
        ),
        module=ModuleSpec(
            title="Document Storage",
            description="Accepts multipart uploads, validates size and type, and stores files in S3-compatible storage.",
        ),
        tasks=(
            "Configure multipart limits and an S3-compatible storage client",
            "Add a drag-and-drop upload component with progress feedback",
        ),
        snippet_hint=_hint(
            """
            @PostMapping(value = "/{id}/attachments", consumes = MediaType.MULTIPART_FORM_DATA_VALUE)
            public ResponseEntity<Map<String, String>> upload(@PathVariable Long id, @RequestParam("file") MultipartFile file) {
                String url = storageService.store(id, file);
                return ResponseEntity.status(HttpStatus.CREATED).body(Map.of("url", url));
            }
            """
        ),
    ),
    FeatureDefinition(
        key=FeatureKey.NOTIFICATIONS,
        label="Email Notifications",
        description="Send transactional emails and reminders when important events happen.",
        stack_additions=StackSpec(
            backend=("Spring Boot Starter Mail", "Spring Scheduling"),
            tooling=("MailHog (local SMTP)",),
        ),
        module=ModuleSpec(
            title="Notification Service",
            description="Queues and sends templated emails and scheduled reminders for key domain events.",
        ),
        tasks=(
            "Create Thymeleaf email templates and a mail sender service",
            "Schedule reminder jobs with @Scheduled and test them with MailHog",
        ),
        snippet_hint=_hint(
            """
            @PostMapping("/{id}/notify")
            public ResponseEntity<Void> notify(@PathVariable Long id) {
                notificationService.sendUpdate(id);
                return ResponseEntity.accepted().build();
            }
            """
        ),
    ),
    FeatureDefinition(
        key=FeatureKey.SEARCH,
        label="Search & Filters",
        description="Keyword search, filtering, sorting, and pagination over large lists.",
        stack_additions=StackSpec(
            backend=("Spring Data JPA Specifications",),
            frontend=("TanStack Query",),
        ),
        module=ModuleSpec(
            title="Search & Filtering",
            description="Composable JPA specifications with pageable, sortable query endpoints.",
        ),
        tasks=(
            "Implement JPA specifications for keyword and filter queries",
            "Add paginated, debounced search inputs to list views",
        ),
        snippet_hint=_hint(
            """
            @GetMapping("/search")
            public ResponseEntity<Page<Object>> search(@RequestParam String q, Pageable pageable) {
                return ResponseEntity.ok(service.search(q, pageable));
            }
            """
        ),
    ),
    FeatureDefinition(
        key=FeatureKey.ANALYTICS,
        label="Analytics Dashboard",
        description="Charts and summary metrics that showcase usage and key figures.",
        stack_additions=StackSpec(
            backend=("Spring Boot Actuator",),
            frontend=("Recharts",),
            database=("Reporting views",),
        ),
        module=ModuleSpec(
            title="Reporting & Analytics",
            description="Aggregates domain data into summary metrics and time series for dashboard charts.",
        ),
        tasks=(
            "Write aggregate queries and reporting views for key metrics",
            "Build dashboard charts with Recharts",
        ),
    ),
    FeatureDefinition(
        key=FeatureKey.PAYMENTS,
        label="Online Payments",
        description="Collect fees or orders through a hosted payment gateway in test mode.",
        stack_additions=StackSpec(
            backend=("Stripe Java SDK",),
            frontend=("Stripe.js",),
            database=("Payments ledger table",),
        ),
        module=ModuleSpec(
            title="Payment Gateway",
            description="Creates checkout sessions, verifies webhooks, and records payment status in a ledger.",
        ),
        tasks=(
            "Integrate Stripe checkout sessions in test mode",
            "Verify webhook signatures and persist payment status",
        ),
        snippet_hint=_hint(
            """
            @PostMapping("/{id}/checkout")
            public ResponseEntity<Map<String, String>> checkout(@PathVariable Long id) {
                String sessionUrl = paymentService.createCheckoutSession(id);
                return ResponseEntity.ok(Map.of("checkoutUrl", sessionUrl));
            }
            """
        ),
    ),
    FeatureDefinition(
        key=FeatureKey.REALTIME_CHAT,
        label="Real-time Chat",
        description="Live messaging between users over WebSockets.",
        stack_additions=StackSpec(
            backend=("Spring WebSocket (STOMP)",),
            frontend=("SockJS + STOMP.js",),
            database=("Messages table",),
        ),
        module=ModuleSpec(
            title="Messaging Hub",
            description="STOMP over WebSocket broker that persists and broadcasts chat messages per conversation.",
        ),
        tasks=(
            "Configure a STOMP message broker and conversation topics",
            "Build a chat panel with live message updates",
        ),
    ),
)


FEATURE_DEFINITIONS: Mapping[FeatureKey, FeatureDefinition] = MappingProxyType(
    {definition.key: definition for definition in _FEATURES}
)

# Canonical iteration order for every composer.
FEATURE_ORDER: tuple[FeatureKey, ...] = tuple(FeatureKey)
